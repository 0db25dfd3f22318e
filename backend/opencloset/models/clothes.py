"""Clothes model for rentable items."""

from sqlalchemy import Column, Integer, String

from opencloset.core.database import Base


class Clothes(Base):
    """Clothes model - a rentable garment identified by its code."""

    __tablename__ = "clothes"

    code = Column(String(5), primary_key=True)
    category = Column(String(32), nullable=False)
    gender = Column(String(8), nullable=True)
    price = Column(Integer, nullable=False, default=0)
