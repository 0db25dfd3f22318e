"""SMS queueing service."""

import logging
import re

from sqlalchemy.orm import Session

from opencloset.core.config import settings
from opencloset.models.sms import SMS
from opencloset.repositories.sms_repository import SMSRepository

logger = logging.getLogger(__name__)

_NON_DIGIT = re.compile(r"\D")


class SMSService:
    """Service that queues text messages for the external sender."""

    def __init__(self, db: Session, default_sender: str | None = None):
        self.repo = SMSRepository(db)
        self.default_sender = default_sender or settings.SMS_FROM

    def send(self, to: str | None, text: str | None, sender: str | None = None) -> SMS | None:
        """Queue a message.

        Args:
            to: Recipient phone number; dashes and spaces are removed.
            text: Message body.
            sender: Sender number, defaults to the service's number.

        Returns:
            The queued SMS, or None when the recipient or text is missing.
        """
        to = _NON_DIGIT.sub("", to or "")
        if not to or not text:
            logger.info("SMS skipped, missing recipient or text")
            return None

        sms = self.repo.create(sender or self.default_sender, to, text)
        logger.info("SMS %s queued to %s", sms.id, to)
        return sms
