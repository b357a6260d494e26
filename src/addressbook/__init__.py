"""
Address book core: clean-architecture layout.

- domain: entities (Contact, ContactData, Business, AddressBookEntry). No outer dependencies.
- application: use cases (ContactRegistry), ports (AddressBookRepository, EventPublisher), events, errors.
- infrastructure: adapters (InMemoryAddressBookRepository, Neo4jAddressBookRepository, publishers, config).
"""

from addressbook.application import (
    AddressBookError,
    AddressBookRepository,
    ContactNotFoundError,
    ContactRegistered,
    ContactRegistry,
    EventPublisher,
    LinkNotFoundError,
)
from addressbook.domain import AddressBookEntry, Business, Contact, ContactData
from addressbook.infrastructure import (
    InMemoryAddressBookRepository,
    InMemoryEventPublisher,
    LoggingEventPublisher,
    Neo4jAddressBookRepository,
)

__all__ = [
    "AddressBookEntry",
    "AddressBookError",
    "AddressBookRepository",
    "Business",
    "Contact",
    "ContactData",
    "ContactNotFoundError",
    "ContactRegistered",
    "ContactRegistry",
    "EventPublisher",
    "InMemoryAddressBookRepository",
    "InMemoryEventPublisher",
    "LinkNotFoundError",
    "LoggingEventPublisher",
    "Neo4jAddressBookRepository",
]
