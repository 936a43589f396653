"""Domain models for contact form submissions."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ContactMessage:
    """A message left through the public contact form."""

    id: UUID
    name: str
    email: str
    subject: str
    message: str
    received_at: datetime
