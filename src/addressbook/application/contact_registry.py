"""Contact registration, deduplication by NIN, update and detach within a business address book."""

import logging

from addressbook.application.events import ContactRegistered
from addressbook.application.ports import AddressBookRepository, EventPublisher
from addressbook.domain import AddressBookEntry, Business, Contact, ContactData

logger = logging.getLogger(__name__)


class ContactRegistry:
    """Use cases over a business address book. Each call runs to completion, no transaction."""

    def __init__(
        self,
        repository: AddressBookRepository,
        events: EventPublisher,
    ) -> None:
        self._repo = repository
        self._events = events

    def register(self, user: str | None, business: Business, data: ContactData) -> Contact:
        """Register a contact for business.

        Returns the contact already linked to business with the same NIN if there
        is one (notes are not applied in that case); otherwise creates, links and
        annotates a new contact. A ContactRegistered event is published either way.
        """
        contact = self.get_existing(user, business, data.nin)
        created = contact is None
        if contact is None:
            contact = self._repo.create_contact(data)
            self._repo.attach(business, contact.id)

            logger.info("Contact created contact_id=%s", contact.id)

            self._update_notes(business, contact, data.notes)

        self._events.publish(
            ContactRegistered(
                contact=contact,
                business_id=business.id,
                registered_by=user,
                created=created,
            )
        )
        return contact

    def get_existing(self, user: str | None, business: Business, nin: str | None) -> Contact | None:
        """Return the first contact with this NIN already linked to business, or None.

        A blank NIN never matches and does not hit the repository.
        """
        nin = (nin or "").strip()
        if not nin:
            return None

        for candidate in self._repo.find_contacts_by_nin(nin):
            logger.info("Found existing contact_id=%s", candidate.id)

            if self._repo.is_linked(business.id, candidate.id):
                logger.info(
                    "Existing contact_id=%s is already linked to business_id=%s",
                    candidate.id,
                    business.id,
                )
                return candidate

        return None

    def find(self, business: Business, contact: Contact) -> Contact | None:
        """Find a contact within the business address book only."""
        return self._repo.find_linked(business.id, contact.id)

    def update(
        self,
        business: Business,
        contact: Contact,
        data: ContactData,
        notes: str | None = None,
    ) -> Contact:
        """Replace every contact field from data and persist.

        Notes are only written when non-empty; empty or None keeps the previous notes.
        """
        updated = contact.with_data(data)
        self._repo.save_contact(updated)

        self._update_notes(business, updated, notes)
        return updated

    def detach(self, business: Business, contact: Contact) -> int:
        """Remove contact from the business address book. The contact itself is kept."""
        removed = self._repo.detach(business.id, contact.id)
        if removed:
            logger.info(
                "Contact contact_id=%s detached from business_id=%s",
                contact.id,
                business.id,
            )
        return removed

    def get_notes(self, business: Business, contact: Contact) -> str | None:
        entry = self._repo.get_entry(business.id, contact.id)
        if entry is None:
            return None
        return entry.notes

    def list_contacts(self, business: Business) -> list[AddressBookEntry]:
        """Return the business address book (contact and notes) in link order."""
        return self._repo.list_entries(business.id)

    def _update_notes(self, business: Business, contact: Contact, notes: str | None) -> None:
        # Link must exist; the repository raises LinkNotFoundError otherwise.
        if notes:
            self._repo.update_link_notes(business.id, contact.id, notes)
