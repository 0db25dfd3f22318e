"""Registration of the view helpers on the application.

Helpers that only transform data live on ``app.state.helpers`` so templates
and handlers share one set of callables. Helpers that write to the database
(coupons, SMS) are services used through request-scoped sessions.
"""

from collections.abc import Callable
from typing import Any

from fastapi import FastAPI

from opencloset.core.errors import error, register_error_handlers
from opencloset.services.footer import render_footer
from opencloset.services.formatting import age, avatar_url, code2decimal, commify
from opencloset.services.holiday_service import get_holidays
from opencloset.services.parcel import parcel
from opencloset.services.status import get_status

HELPERS: dict[str, Callable[..., Any]] = {
    "age": age,
    "avatar_url": avatar_url,
    "code2decimal": code2decimal,
    "commify": commify,
    "error": error,
    "footer": render_footer,
    "get_status": get_status,
    "holidays": get_holidays,
    "parcel": parcel,
}


def register_helpers(app: FastAPI) -> None:
    """Expose the helpers on ``app.state`` and install the error handlers."""
    app.state.helpers = dict(HELPERS)
    register_error_handlers(app)
