"""In-memory contact message storage."""

from dataclasses import dataclass, field

from artist_gallery.domain.contact import ContactMessage


@dataclass
class InMemoryContactRepository:
    """Keeps contact messages for the lifetime of the process."""

    messages: list[ContactMessage] = field(default_factory=list)

    def add_message(self, message: ContactMessage) -> None:
        self.messages.append(message)

    def list_messages(self) -> list[ContactMessage]:
        return sorted(self.messages, key=lambda item: item.received_at, reverse=True)
