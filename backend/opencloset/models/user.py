"""User model for customers placing orders."""

from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String, func

from opencloset.core.database import Base


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class User(Base):
    """User model - a customer of the rental service."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=True, index=True)
    phone = Column(String(16), nullable=True)
    gender = Column(String(8), nullable=True)
    birth = Column(Integer, nullable=True)

    create_date = Column(DateTime(timezone=True), server_default=func.now())
