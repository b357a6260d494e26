"""Neo4j implementation of AddressBookRepository.
Graph: (b:Business {id, name})-[:HAS_CONTACT {notes, linked_at}]->(c:Contact {...}).
Contacts are global (shared between businesses); the relationship is the address book entry.
Dates and datetimes are stored as ISO strings.
"""

from datetime import date, datetime

from addressbook.application.errors import ContactNotFoundError, LinkNotFoundError
from addressbook.domain import AddressBookEntry, Business, Contact, ContactData
from addressbook.domain.phone import mobile_to_e164

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.id IS UNIQUE
    """,
    """
    CREATE CONSTRAINT business_id_unique IF NOT EXISTS
    FOR (b:Business) REQUIRE b.id IS UNIQUE
    """,
    """
    CREATE INDEX contact_nin IF NOT EXISTS
    FOR (c:Contact) ON (c.nin)
    """,
)

_CREATE_CONTACT_QUERY = """
CREATE (c:Contact $props)
RETURN c
"""

_SAVE_CONTACT_QUERY = """
MATCH (c:Contact {id: $id})
SET c += $props
RETURN c.id AS id
"""

_GET_CONTACT_QUERY = """
MATCH (c:Contact {id: $id})
RETURN c
"""

_FIND_BY_NIN_QUERY = """
MATCH (c:Contact)
WHERE c.nin IS NOT NULL AND c.nin = $nin
RETURN c
ORDER BY c.created_at
"""

_IS_LINKED_QUERY = """
MATCH (:Business {id: $business_id})-[:HAS_CONTACT]->(:Contact {id: $contact_id})
RETURN count(*) > 0 AS linked
"""

_FIND_LINKED_QUERY = """
MATCH (:Business {id: $business_id})-[k:HAS_CONTACT]->(c:Contact {id: $contact_id})
RETURN c, k
"""

_ATTACH_QUERY = """
MATCH (c:Contact {id: $contact_id})
MERGE (b:Business {id: $business_id})
ON CREATE SET b.name = $business_name
MERGE (b)-[k:HAS_CONTACT]->(c)
ON CREATE SET k.linked_at = $linked_at
RETURN c.id AS id
"""

_DETACH_QUERY = """
MATCH (:Business {id: $business_id})-[k:HAS_CONTACT]->(:Contact {id: $contact_id})
DELETE k
RETURN count(*) AS removed
"""

_UPDATE_NOTES_QUERY = """
MATCH (:Business {id: $business_id})-[k:HAS_CONTACT]->(:Contact {id: $contact_id})
SET k.notes = $notes
RETURN 1 AS ok
"""

_LIST_ENTRIES_QUERY = """
MATCH (:Business {id: $business_id})-[k:HAS_CONTACT]->(c:Contact)
RETURN c, k
ORDER BY k.linked_at
"""


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def ensure_constraints(driver) -> None:
    """Create unique constraints on Contact.id, Business.id and an index on Contact.nin if missing."""
    with driver.session() as session:
        for query in _CONSTRAINT_QUERIES:
            session.run(query)


class Neo4jAddressBookRepository:
    """Stores contacts and address book links in Neo4j.
    Alongside the raw mobile, the E.164 form is stored as mobile_e164 when it parses.
    default_region stands in for a missing mobile_country when computing it.
    """

    def __init__(self, driver: object, *, default_region: str | None = None) -> None:
        self._driver = driver
        self._default_region = default_region

    def _contact_props(self, contact: Contact) -> dict:
        e164 = contact.mobile_e164
        if e164 is None and not contact.mobile_country:
            e164 = mobile_to_e164(contact.mobile, self._default_region)
        return {
            "firstname": contact.firstname,
            "lastname": contact.lastname,
            "email": contact.email,
            "nin": contact.nin,
            "gender": contact.gender,
            "birthdate": contact.birthdate.isoformat() if contact.birthdate else None,
            "mobile": contact.mobile,
            "mobile_country": contact.mobile_country,
            "mobile_e164": e164,
        }

    def create_contact(self, data: ContactData) -> Contact:
        contact = Contact.from_data(data)
        props = {k: v for k, v in self._contact_props(contact).items() if v is not None}
        props["id"] = contact.id
        props["created_at"] = _datetime_to_iso(contact.created_at)
        with self._driver.session() as session:
            session.run(_CREATE_CONTACT_QUERY, props=props).consume()
        return contact

    def save_contact(self, contact: Contact) -> None:
        # SET += with a null value removes the property, so cleared fields read back as None.
        with self._driver.session() as session:
            result = session.run(
                _SAVE_CONTACT_QUERY,
                id=contact.id,
                props=self._contact_props(contact),
            )
            if result.single() is None:
                raise ContactNotFoundError(contact.id)

    def get_contact(self, contact_id: str) -> Contact | None:
        with self._driver.session() as session:
            record = session.run(_GET_CONTACT_QUERY, id=contact_id).single()
        if not record:
            return None
        return _node_to_contact(record["c"])

    def find_contacts_by_nin(self, nin: str) -> list[Contact]:
        with self._driver.session() as session:
            result = session.run(_FIND_BY_NIN_QUERY, nin=nin)
            return [_node_to_contact(rec["c"]) for rec in result]

    def is_linked(self, business_id: str, contact_id: str) -> bool:
        with self._driver.session() as session:
            record = session.run(
                _IS_LINKED_QUERY,
                business_id=business_id,
                contact_id=contact_id,
            ).single()
        return bool(record and record["linked"])

    def find_linked(self, business_id: str, contact_id: str) -> Contact | None:
        entry = self.get_entry(business_id, contact_id)
        if entry is None:
            return None
        return entry.contact

    def attach(self, business: Business, contact_id: str) -> None:
        with self._driver.session() as session:
            record = session.run(
                _ATTACH_QUERY,
                business_id=business.id,
                business_name=business.name,
                contact_id=contact_id,
                linked_at=_datetime_to_iso(datetime.utcnow()),
            ).single()
        if record is None:
            raise ContactNotFoundError(contact_id)

    def detach(self, business_id: str, contact_id: str) -> int:
        with self._driver.session() as session:
            record = session.run(
                _DETACH_QUERY,
                business_id=business_id,
                contact_id=contact_id,
            ).single()
        return record["removed"] if record else 0

    def update_link_notes(self, business_id: str, contact_id: str, notes: str) -> None:
        with self._driver.session() as session:
            record = session.run(
                _UPDATE_NOTES_QUERY,
                business_id=business_id,
                contact_id=contact_id,
                notes=notes,
            ).single()
        if record is None:
            raise LinkNotFoundError(business_id, contact_id)

    def get_entry(self, business_id: str, contact_id: str) -> AddressBookEntry | None:
        with self._driver.session() as session:
            record = session.run(
                _FIND_LINKED_QUERY,
                business_id=business_id,
                contact_id=contact_id,
            ).single()
        if not record:
            return None
        return _record_to_entry(business_id, record)

    def list_entries(self, business_id: str) -> list[AddressBookEntry]:
        with self._driver.session() as session:
            result = session.run(_LIST_ENTRIES_QUERY, business_id=business_id)
            return [_record_to_entry(business_id, rec) for rec in result]


def _node_to_contact(c) -> Contact:
    birthdate = c.get("birthdate")
    return Contact(
        id=c["id"],
        firstname=c["firstname"],
        lastname=c.get("lastname"),
        email=c.get("email"),
        nin=c.get("nin"),
        gender=c.get("gender"),
        birthdate=date.fromisoformat(birthdate) if birthdate else None,
        mobile=c.get("mobile"),
        mobile_country=c.get("mobile_country"),
        created_at=_iso_to_datetime(c["created_at"]),
    )


def _record_to_entry(business_id: str, record) -> AddressBookEntry:
    k = record["k"]
    return AddressBookEntry(
        business_id=business_id,
        contact=_node_to_contact(record["c"]),
        notes=k.get("notes"),
        linked_at=_iso_to_datetime(k["linked_at"]),
    )
