"""Event model for promotional campaigns owning coupons."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func

from opencloset.core.database import Base


class Event(Base):
    """Event model - a time-bounded promotion."""

    __tablename__ = "event"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), unique=True, nullable=True)
    title = Column(String(255), nullable=False)
    desc = Column(Text, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    free_shipping = Column(Boolean, nullable=False, default=False)

    create_date = Column(DateTime(timezone=True), server_default=func.now())
