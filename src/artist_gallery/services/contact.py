"""Contact form handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from artist_gallery.domain.contact import ContactMessage

_logger = logging.getLogger(__name__)


class ContactValidationError(ValueError):
    """Raised when a contact submission is incomplete."""


class ContactRepository(Protocol):
    """Storage interface for contact messages."""

    def add_message(self, message: ContactMessage) -> None:
        """Store a received message."""

    def list_messages(self) -> list[ContactMessage]:
        """Return messages, newest first."""


@dataclass
class ContactService:
    """Service for the public contact form."""

    repository: ContactRepository

    def submit(
        self, name: str, email: str, subject: str, message: str
    ) -> ContactMessage:
        """Validate and store a contact form submission."""
        if not name.strip():
            raise ContactValidationError("Name is required")
        if "@" not in email:
            raise ContactValidationError("A valid email is required")
        if not message.strip():
            raise ContactValidationError("Message is required")
        record = ContactMessage(
            id=uuid4(),
            name=name.strip(),
            email=email.strip(),
            subject=subject.strip(),
            message=message.strip(),
            received_at=datetime.now(tz=UTC),
        )
        self.repository.add_message(record)
        _logger.info("Contact message received: id=%s", record.id)
        return record

    def list_messages(self) -> list[ContactMessage]:
        """Return received messages, newest first."""
        return self.repository.list_messages()
