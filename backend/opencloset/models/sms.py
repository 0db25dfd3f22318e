"""SMS model for queued text messages."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from opencloset.core.database import Base


class SMS(Base):
    """SMS model - a message waiting for the external sender."""

    __tablename__ = "sms"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_ = Column("from", String(12), nullable=False)
    to = Column(String(12), nullable=False, index=True)
    text = Column(Text, nullable=False)
    ret = Column(Integer, nullable=True)
    status = Column(String(32), nullable=False, default="pending")
    method = Column(String(32), nullable=True)
    sent_date = Column(DateTime(timezone=True), nullable=True)

    create_date = Column(DateTime(timezone=True), server_default=func.now())
