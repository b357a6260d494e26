"""Events emitted by the application layer."""

from dataclasses import dataclass, field
from datetime import datetime

from addressbook.domain import Contact


@dataclass(frozen=True)
class ContactRegistered:
    """A contact was registered in a business address book (new or already linked)."""

    contact: Contact
    business_id: str
    registered_by: str | None = None
    created: bool = False
    occurred_at: datetime = field(default_factory=datetime.utcnow)
