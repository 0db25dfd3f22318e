"""Clothes repository for data access."""

from sqlalchemy.orm import Session

from opencloset.models.clothes import Clothes


class ClothesRepository:
    """Repository for Clothes model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_code(self, code: str) -> Clothes | None:
        """Get clothes by code."""
        return self.db.query(Clothes).filter(Clothes.code == code).first()
