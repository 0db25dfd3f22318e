"""Coupon API endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from opencloset.core.database import get_db
from opencloset.models.coupon import Coupon
from opencloset.repositories.coupon_repository import CouponRepository
from opencloset.schemas.coupon import CouponCreate, CouponResponse, CouponValidateRequest
from opencloset.services import coupon_code
from opencloset.services.coupon_service import CouponService

router = APIRouter()


@router.post(
    "/",
    response_model=CouponResponse,
    status_code=201,
    summary="Create coupon",
    responses={
        400: {"description": "Invalid coupon code"},
        409: {"description": "Coupon with this code already exists"},
        422: {"description": "Validation error"},
    },
)
async def create_coupon(
    data: CouponCreate,
    db: Session = Depends(get_db),
) -> Coupon:
    """Create a coupon, generating a code when none is given."""
    code = coupon_code.parse(data.code) if data.code else coupon_code.generate()
    repo = CouponRepository(db)
    if repo.get_by_code(code):
        raise HTTPException(status_code=409, detail="Coupon with this code already exists")
    return repo.create(data, code)


@router.post(
    "/validate",
    response_model=CouponResponse,
    summary="Validate coupon code",
    responses={
        400: {"description": "Invalid, used, expired coupon or ended event"},
        404: {"description": "Coupon not found"},
    },
)
async def validate_coupon(
    data: CouponValidateRequest,
    db: Session = Depends(get_db),
) -> Coupon:
    """Validate a coupon code; releases the coupon from orders holding it."""
    return CouponService(db).validate(data.code)


@router.get(
    "/{code}",
    response_model=CouponResponse,
    summary="Get coupon",
    responses={404: {"description": "Coupon not found"}},
)
async def get_coupon(
    code: str,
    db: Session = Depends(get_db),
) -> Coupon:
    """Get a coupon by code."""
    coupon = CouponRepository(db).get_by_code(coupon_code.parse(code))
    if not coupon:
        raise HTTPException(status_code=404, detail="Coupon not found")
    return coupon
