"""Domain entities: Contact, ContactData, Business and AddressBookEntry."""

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime

from addressbook.domain.phone import mobile_to_e164


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not str(value).strip():
        return None
    return value


@dataclass(frozen=True)
class ContactData:
    """
    Input record for registering or updating a contact.
    Every field is copied as-is on update; notes belong to the business link.
    """

    firstname: str = ""
    lastname: str | None = None
    email: str | None = None
    nin: str | None = None
    gender: str | None = None
    birthdate: date | None = None
    mobile: str | None = None
    mobile_country: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class Contact:
    """
    Represents a real individual that one or more businesses keep in their address book.
    A blank NIN means "not set" and is stored as None; any other NIN is kept as given.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    firstname: str = field(default="")
    lastname: str | None = None
    email: str | None = None
    nin: str | None = None
    gender: str | None = None
    birthdate: date | None = None
    mobile: str | None = None
    mobile_country: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        if not self.firstname or not self.firstname.strip():
            raise ValueError("Contact firstname must be non-empty.")
        object.__setattr__(self, "nin", _blank_to_none(self.nin))

    @classmethod
    def from_data(cls, data: ContactData) -> "Contact":
        return cls(
            firstname=data.firstname,
            lastname=data.lastname,
            email=data.email,
            nin=data.nin,
            gender=data.gender,
            birthdate=data.birthdate,
            mobile=data.mobile,
            mobile_country=data.mobile_country,
        )

    def with_data(self, data: ContactData) -> "Contact":
        """Return a copy with every mutable field replaced from data (no merge)."""
        return Contact(
            id=self.id,
            firstname=data.firstname,
            lastname=data.lastname,
            email=data.email,
            nin=data.nin,
            gender=data.gender,
            birthdate=data.birthdate,
            mobile=data.mobile,
            mobile_country=data.mobile_country,
            created_at=self.created_at,
        )

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.firstname, self.lastname) if p)

    @property
    def mobile_e164(self) -> str | None:
        return mobile_to_e164(self.mobile, self.mobile_country)


@dataclass(frozen=True)
class Business:
    """An entity owning an address book of linked contacts."""

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = ""


@dataclass(frozen=True)
class AddressBookEntry:
    """
    The link between a business and a contact.
    Notes live here, not on either endpoint.
    """

    business_id: str
    contact: Contact
    notes: str | None = None
    linked_at: datetime = field(default_factory=datetime.utcnow)
