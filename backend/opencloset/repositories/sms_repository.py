"""SMS repository for data access."""

from sqlalchemy.orm import Session

from opencloset.models.sms import SMS


class SMSRepository:
    """Repository for SMS model."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, sender: str, to: str, text: str) -> SMS:
        """Queue a new SMS."""
        sms = SMS(from_=sender, to=to, text=text)
        self.db.add(sms)
        self.db.commit()
        self.db.refresh(sms)
        return sms
