"""User repository for data access."""

from sqlalchemy.orm import Session

from opencloset.models.user import User


class UserRepository:
    """Repository for User model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        """Get a user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()
