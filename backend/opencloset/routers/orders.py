"""Order coupon and discount endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from opencloset.core.database import get_db
from opencloset.models.order import Order
from opencloset.repositories.order_repository import OrderDetailRepository, OrderRepository
from opencloset.schemas.coupon import ApplyCouponRequest
from opencloset.schemas.order import OrderDetailResponse, OrderResponse
from opencloset.services.coupon_service import CouponService
from opencloset.services.discount_service import DiscountService

router = APIRouter()


def _get_order(db: Session, order_id: int) -> Order:
    order = OrderRepository(db).get_by_id(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


def _order_response(db: Session, order: Order) -> OrderResponse:
    details = OrderDetailRepository(db).get_by_order_id(order.id)  # type: ignore[arg-type]
    response = OrderResponse.model_validate(order)
    response.order_details = [OrderDetailResponse.model_validate(d) for d in details]
    return response


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    summary="Get order",
    responses={404: {"description": "Order not found"}},
)
async def get_order(
    order_id: int,
    db: Session = Depends(get_db),
) -> OrderResponse:
    """Get an order with its details."""
    return _order_response(db, _get_order(db, order_id))


@router.post(
    "/{order_id}/coupon",
    response_model=OrderResponse,
    summary="Use coupon on order",
    responses={
        400: {"description": "Invalid, used, expired coupon or ended event"},
        404: {"description": "Order or coupon not found"},
    },
)
async def use_coupon(
    order_id: int,
    data: ApplyCouponRequest,
    db: Session = Depends(get_db),
) -> OrderResponse:
    """Validate a code, move the coupon onto the order and add its discount."""
    order = _get_order(db, order_id)
    coupon_service = CouponService(db)
    coupon = coupon_service.validate(data.code)
    coupon_service.transfer(coupon, order)
    DiscountService(db).apply(order)
    return _order_response(db, order)


@router.post(
    "/{order_id}/discount",
    response_model=OrderResponse,
    summary="Apply order discount",
    responses={404: {"description": "Order not found"}},
)
async def apply_discount(
    order_id: int,
    db: Session = Depends(get_db),
) -> OrderResponse:
    """Add the discount of the coupon the order already holds."""
    order = _get_order(db, order_id)
    DiscountService(db).apply(order)
    return _order_response(db, order)
