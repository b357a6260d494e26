"""In-memory implementation of AddressBookRepository (no DB)."""

from dataclasses import replace
from datetime import datetime

from addressbook.application.errors import ContactNotFoundError, LinkNotFoundError
from addressbook.domain import AddressBookEntry, Business, Contact, ContactData


class InMemoryAddressBookRepository:
    """Stores contacts and links in memory. Order preserved by insertion.
    Links are keyed by (business_id, contact_id) so a pair exists at most once.
    """

    def __init__(self) -> None:
        self._contacts: dict[str, Contact] = {}
        self._businesses: dict[str, Business] = {}
        self._links: dict[tuple[str, str], AddressBookEntry] = {}

    def create_contact(self, data: ContactData) -> Contact:
        contact = Contact.from_data(data)
        self._contacts[contact.id] = contact
        return contact

    def save_contact(self, contact: Contact) -> None:
        if contact.id not in self._contacts:
            raise ContactNotFoundError(contact.id)
        self._contacts[contact.id] = contact
        # Entries hold a snapshot of the contact; keep them current.
        for key, entry in self._links.items():
            if key[1] == contact.id:
                self._links[key] = replace(entry, contact=contact)

    def get_contact(self, contact_id: str) -> Contact | None:
        return self._contacts.get(contact_id)

    def find_contacts_by_nin(self, nin: str) -> list[Contact]:
        return [c for c in self._contacts.values() if c.nin is not None and c.nin == nin]

    def is_linked(self, business_id: str, contact_id: str) -> bool:
        return (business_id, contact_id) in self._links

    def find_linked(self, business_id: str, contact_id: str) -> Contact | None:
        entry = self._links.get((business_id, contact_id))
        if entry is None:
            return None
        return entry.contact

    def attach(self, business: Business, contact_id: str) -> None:
        contact = self._contacts.get(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        self._businesses.setdefault(business.id, business)
        key = (business.id, contact_id)
        if key in self._links:
            return
        self._links[key] = AddressBookEntry(
            business_id=business.id,
            contact=contact,
            linked_at=datetime.utcnow(),
        )

    def detach(self, business_id: str, contact_id: str) -> int:
        if self._links.pop((business_id, contact_id), None) is None:
            return 0
        return 1

    def update_link_notes(self, business_id: str, contact_id: str, notes: str) -> None:
        key = (business_id, contact_id)
        entry = self._links.get(key)
        if entry is None:
            raise LinkNotFoundError(business_id, contact_id)
        self._links[key] = replace(entry, notes=notes)

    def get_entry(self, business_id: str, contact_id: str) -> AddressBookEntry | None:
        return self._links.get((business_id, contact_id))

    def list_entries(self, business_id: str) -> list[AddressBookEntry]:
        return [e for (bid, _), e in self._links.items() if bid == business_id]
