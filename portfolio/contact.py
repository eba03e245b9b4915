"""Contact form with a simulated send.

Nothing leaves the browser session: a submission waits for a fixed delay and
always succeeds. Each ``begin`` hands out a ticket; a later ``begin`` or a
``cancel`` invalidates older tickets so a send finishing after its view went
away is discarded instead of touching the fields.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Mapping, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

SUBMIT_DELAY_SECONDS = 1.0
FIELD_NAMES = ("name", "email", "subject", "message")


class ContactFormError(ValueError):
    """Raised for submissions missing required fields or naming unknown ones."""


class ContactStatus(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    SENT = "sent"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    ContactStatus.IDLE: "",
    ContactStatus.SENDING: "Sending...",
    ContactStatus.SENT: "Message sent successfully!",
}


class ContactMessage(BaseModel):
    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""

    def missing_fields(self) -> List[str]:
        return [field for field in FIELD_NAMES if not getattr(self, field).strip()]


class ContactForm:
    def __init__(
        self,
        message: Optional[ContactMessage] = None,
        *,
        status: ContactStatus = ContactStatus.IDLE,
        ticket: int = 0,
        delay: float = SUBMIT_DELAY_SECONDS,
    ) -> None:
        self.message = message or ContactMessage()
        self.status = status
        self.ticket = ticket
        self.delay = delay

    @classmethod
    def from_mapping(cls, values: Mapping[str, object], **kwargs) -> "ContactForm":
        form = cls(**kwargs)
        for field in FIELD_NAMES:
            if field in values:
                form.update(field, values[field])
        return form

    def update(self, field: str, value: object) -> None:
        if field not in FIELD_NAMES:
            raise ContactFormError(f"Unknown contact field: {field!r}")
        setattr(self.message, field, "" if value is None else str(value))

    def begin(self) -> int:
        """Mark the form as sending and return the ticket for this send."""

        missing = self.message.missing_fields()
        if missing:
            raise ContactFormError(f"Missing required fields: {', '.join(missing)}")
        self.ticket += 1
        self.status = ContactStatus.SENDING
        return self.ticket

    def complete(self, ticket: int) -> bool:
        if ticket != self.ticket or self.status is not ContactStatus.SENDING:
            logger.debug("Discarding stale contact submission %s", ticket)
            return False
        self.status = ContactStatus.SENT
        self.message = ContactMessage()
        return True

    def cancel(self) -> None:
        self.ticket += 1
        if self.status is ContactStatus.SENDING:
            self.status = ContactStatus.IDLE
