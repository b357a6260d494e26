"""Application layer: use cases, ports, events and errors. Depends only on domain."""

from addressbook.application.contact_registry import ContactRegistry
from addressbook.application.errors import (
    AddressBookError,
    ContactNotFoundError,
    LinkNotFoundError,
)
from addressbook.application.events import ContactRegistered
from addressbook.application.ports import AddressBookRepository, EventPublisher

__all__ = [
    "AddressBookError",
    "AddressBookRepository",
    "ContactNotFoundError",
    "ContactRegistered",
    "ContactRegistry",
    "EventPublisher",
    "LinkNotFoundError",
]
