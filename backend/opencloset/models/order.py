"""Order and OrderDetail models for rental transactions."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func

from opencloset.core.database import Base


class Order(Base):
    """Order model - a customer rental transaction."""

    __tablename__ = "order"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="RESTRICT"), nullable=True, index=True)
    coupon_id = Column(
        Integer, ForeignKey("coupon.id", ondelete="SET NULL"), nullable=True, index=True
    )
    status_id = Column(Integer, nullable=True, index=True)
    online = Column(Boolean, nullable=False, default=False)
    additional_day = Column(Integer, nullable=False, default=0)
    misc = Column(Text, nullable=True)

    create_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class OrderDetail(Base):
    """OrderDetail model - one line item of an order."""

    __tablename__ = "order_detail"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer, ForeignKey("order.id", ondelete="CASCADE"), nullable=False, index=True
    )
    clothes_code = Column(
        String(5), ForeignKey("clothes.code", ondelete="SET NULL"), nullable=True, index=True
    )
    name = Column(String(255), nullable=True)
    price = Column(Integer, nullable=False, default=0)
    final_price = Column(Integer, nullable=False, default=0)
    desc = Column(Text, nullable=True)

    create_date = Column(DateTime(timezone=True), server_default=func.now())
