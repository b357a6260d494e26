"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.application.events import ContactRegistered
from addressbook.domain import AddressBookEntry, Business, Contact, ContactData


class AddressBookRepository(Protocol):
    """Persists contacts and their business links (address book entries)."""

    def create_contact(self, data: ContactData) -> Contact:
        """Store a new contact built from data and return it."""
        ...

    def save_contact(self, contact: Contact) -> None:
        """Overwrite a stored contact. Raises ContactNotFoundError if missing."""
        ...

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return the contact by id whether or not any business links it."""
        ...

    def find_contacts_by_nin(self, nin: str) -> list[Contact]:
        """Return contacts with a non-null NIN equal to nin, in creation order."""
        ...

    def is_linked(self, business_id: str, contact_id: str) -> bool:
        ...

    def find_linked(self, business_id: str, contact_id: str) -> Contact | None:
        """Return the contact only if it is in the business address book."""
        ...

    def attach(self, business: Business, contact_id: str) -> None:
        """Link contact to business. Linking an already linked pair is a no-op."""
        ...

    def detach(self, business_id: str, contact_id: str) -> int:
        """Remove the link. Returns the number of links removed (0 or 1)."""
        ...

    def update_link_notes(self, business_id: str, contact_id: str, notes: str) -> None:
        """Set notes on the link. Raises LinkNotFoundError if not linked."""
        ...

    def get_entry(self, business_id: str, contact_id: str) -> AddressBookEntry | None:
        ...

    def list_entries(self, business_id: str) -> list[AddressBookEntry]:
        """Return the business address book in link order."""
        ...


class EventPublisher(Protocol):
    """Hands events to whatever delivers them. Delivery is not our concern."""

    def publish(self, event: ContactRegistered) -> None:
        ...
