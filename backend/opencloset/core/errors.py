"""Uniform error responses for JSON and HTML clients."""

import html
import logging
from string import Template

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from opencloset.services.coupon_errors import CouponError

logger = logging.getLogger(__name__)

ERROR_TEMPLATES = {
    400: "bad_request",
    401: "unauthorized",
    404: "not_found",
    500: "exception",
}

_TITLES = {
    "bad_request": "잘못된 요청",
    "unauthorized": "권한 없음",
    "not_found": "페이지를 찾을 수 없습니다",
    "exception": "서버 오류",
    "unknown": "알 수 없는 오류",
}

_ERROR_PAGE = Template("""\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>$status $title</title>
</head>
<body class="$template">
  <h1>$title</h1>
  <p class="error">$error</p>
</body>
</html>
""")


def _wants_html(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "text/html" in accept and "application/json" not in accept


def render_error_page(status: int, error: str) -> str:
    template = ERROR_TEMPLATES.get(status, "unknown")
    return _ERROR_PAGE.substitute(
        status=status,
        title=_TITLES[template],
        template=template,
        error=html.escape(error),
    )


def error(request: Request, status: int, error: str | None) -> Response:
    """Log an error and respond in the format the client asked for."""
    message = error or ""
    logger.error(message)
    if _wants_html(request):
        return HTMLResponse(render_error_page(status, message), status_code=status)
    return JSONResponse({"error": message}, status_code=status)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CouponError)
    async def coupon_error_handler(request: Request, exc: CouponError) -> Response:
        return error(request, exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
        return error(request, exc.status_code, str(exc.detail))
