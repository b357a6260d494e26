"""Errors raised by address book adapters and use cases."""


class AddressBookError(Exception):
    """Base class for address book errors."""


class ContactNotFoundError(AddressBookError, LookupError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact not found: {contact_id}")
        self.contact_id = contact_id


class LinkNotFoundError(AddressBookError, LookupError):
    """The contact is not in the business address book."""

    def __init__(self, business_id: str, contact_id: str) -> None:
        super().__init__(
            f"Contact {contact_id} is not linked to business {business_id}"
        )
        self.business_id = business_id
        self.contact_id = contact_id
