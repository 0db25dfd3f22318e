from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from opencloset import __version__
from opencloset.core.config import settings
from opencloset.helpers import register_helpers
from opencloset.routers import coupons, helpers, orders

OPENAPI_TAGS = [
    {"name": "Coupons", "description": "Create and validate discount coupons."},
    {"name": "Orders", "description": "Use coupons on orders and add their discounts."},
    {"name": "Helpers", "description": "Status, holiday, parcel, avatar, SMS and footer helpers."},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    description="View helpers and the coupon pipeline of the clothing rental service.",
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_helpers(app)

app.include_router(coupons.router, prefix="/v1/coupons", tags=["Coupons"])
app.include_router(orders.router, prefix="/v1/orders", tags=["Orders"])
app.include_router(helpers.router, prefix="/v1/helpers", tags=["Helpers"])


@app.get("/health", tags=["Helpers"])
async def health() -> dict[str, str]:
    return {"status": "ok"}
