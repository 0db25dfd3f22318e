"""Event repository for data access."""

from sqlalchemy.orm import Session

from opencloset.models.event import Event


class EventRepository:
    """Repository for Event model."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, event_id: int) -> Event | None:
        """Get an event by ID."""
        return self.db.query(Event).filter(Event.id == event_id).first()
