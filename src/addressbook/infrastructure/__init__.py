"""Infrastructure layer: concrete implementations of application ports."""

from addressbook.infrastructure.config import (
    Settings,
    build_repository,
    configure_logging,
    get_driver,
    load_settings,
)
from addressbook.infrastructure.events import InMemoryEventPublisher, LoggingEventPublisher
from addressbook.infrastructure.memory_repository import InMemoryAddressBookRepository
from addressbook.infrastructure.persistence.neo4j_repository import (
    Neo4jAddressBookRepository,
    ensure_constraints,
)

__all__ = [
    "InMemoryAddressBookRepository",
    "InMemoryEventPublisher",
    "LoggingEventPublisher",
    "Neo4jAddressBookRepository",
    "Settings",
    "build_repository",
    "configure_logging",
    "ensure_constraints",
    "get_driver",
    "load_settings",
]
