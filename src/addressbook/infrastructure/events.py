"""EventPublisher adapters: log-only and in-memory recording."""

import logging

from addressbook.application.events import ContactRegistered

logger = logging.getLogger(__name__)


class LoggingEventPublisher:
    """Writes each event to the log. Used where no real delivery is wired."""

    def publish(self, event: ContactRegistered) -> None:
        logger.info(
            "ContactRegistered contact_id=%s business_id=%s created=%s",
            event.contact.id,
            event.business_id,
            event.created,
        )


class InMemoryEventPublisher:
    """Keeps published events in order. Handy in tests and scripts."""

    def __init__(self) -> None:
        self.events: list[ContactRegistered] = []

    def publish(self, event: ContactRegistered) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()
