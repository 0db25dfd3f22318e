"""Order repository for data access."""

from sqlalchemy.orm import Session

from opencloset.models.order import Order, OrderDetail


class OrderRepository:
    """Repository for Order model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, order_id: int) -> Order | None:
        """Get an order by ID."""
        return self.db.query(Order).filter(Order.id == order_id).first()

    def get_by_coupon_id(self, coupon_id: int) -> list[Order]:
        """Get all orders currently holding a coupon."""
        return (
            self.db.query(Order)
            .filter(Order.coupon_id == coupon_id)
            .order_by(Order.id.asc())
            .all()
        )

    def save(self, order: Order) -> Order:
        """Persist pending changes on an order."""
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order


class OrderDetailRepository:
    """Repository for OrderDetail model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_order_id(self, order_id: int) -> list[OrderDetail]:
        """Get the details of an order in insertion order."""
        return (
            self.db.query(OrderDetail)
            .filter(OrderDetail.order_id == order_id)
            .order_by(OrderDetail.id.asc())
            .all()
        )

    def create(
        self,
        order_id: int,
        name: str,
        price: int,
        final_price: int,
        desc: str | None = None,
        clothes_code: str | None = None,
    ) -> OrderDetail:
        """Create a new order detail."""
        detail = OrderDetail(
            order_id=order_id,
            name=name,
            price=price,
            final_price=final_price,
            desc=desc,
            clothes_code=clothes_code,
        )
        self.db.add(detail)
        self.db.commit()
        self.db.refresh(detail)
        return detail

    def save(self, detail: OrderDetail) -> OrderDetail:
        """Persist pending changes on a detail."""
        self.db.commit()
        self.db.refresh(detail)
        return detail

    def delete(self, detail: OrderDetail) -> None:
        """Delete an order detail."""
        self.db.delete(detail)
        self.db.commit()
