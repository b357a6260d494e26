"""Tests for event publisher adapters."""

import logging

from addressbook.application import ContactRegistered
from addressbook.domain import Contact
from addressbook.infrastructure import InMemoryEventPublisher, LoggingEventPublisher


def _event() -> ContactRegistered:
    return ContactRegistered(contact=Contact(id="c1", firstname="Ann"), business_id="b1", created=True)


def test_in_memory_publisher_records_in_order():
    publisher = InMemoryEventPublisher()
    first, second = _event(), _event()
    publisher.publish(first)
    publisher.publish(second)
    assert publisher.events == [first, second]

    publisher.clear()
    assert publisher.events == []


def test_logging_publisher_logs_event(caplog):
    with caplog.at_level(logging.INFO, logger="addressbook.infrastructure.events"):
        LoggingEventPublisher().publish(_event())
    assert "contact_id=c1" in caplog.text
    assert "business_id=b1" in caplog.text
