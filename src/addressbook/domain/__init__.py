"""Domain layer: entities and value objects. No dependencies on outer layers."""

from addressbook.domain.entities import AddressBookEntry, Business, Contact, ContactData
from addressbook.domain.phone import mobile_to_e164

__all__ = ["AddressBookEntry", "Business", "Contact", "ContactData", "mobile_to_e164"]
