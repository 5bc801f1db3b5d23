"""
Business logic for persons.

``PersonService`` implements list, lookup, create, replace, merge and
delete on top of a ``PersonStore``.  All failures are raised as
``PersonNotFoundError`` or ``PersonValidationError`` before the store
is touched, so a failed call never leaves a partial change behind.
"""

import logging
from datetime import datetime, timezone
from typing import List

from ..core.exceptions import PersonNotFoundError, PersonValidationError
from ..core.store import PersonStore
from ..schemas.person import REQUIRED_FIELDS, Person, PersonBase


logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PersonService:
    """Service for managing persons.

    Parameters
    ----------
    store : PersonStore
        Store to operate on.
    empty_list_not_found : bool
        When true, ``list_people`` raises ``PersonNotFoundError`` on an
        empty store instead of returning an empty list.
    """

    def __init__(self, store: PersonStore, empty_list_not_found: bool = True) -> None:
        self.store = store
        self.empty_list_not_found = empty_list_not_found

    @staticmethod
    def validate(data: PersonBase) -> None:
        """Check that every required string field is present and non‑blank.

        Request bodies are already checked by the schema; this guards
        callers that build models with ``model_construct`` or mutate
        them after validation.
        """
        missing = [
            name for name in REQUIRED_FIELDS
            if not isinstance(getattr(data, name, None), str) or not getattr(data, name).strip()
        ]
        if missing:
            raise PersonValidationError(f"Missing required fields: {', '.join(missing)}")

    async def list_people(self) -> List[Person]:
        """Return every stored person in insertion order."""
        people = self.store.list()
        if not people and self.empty_list_not_found:
            raise PersonNotFoundError
        return people

    async def get_person(self, person_id: int) -> Person:
        """Return the person with ``person_id`` or raise ``PersonNotFoundError``."""
        person = self.store.get(person_id)
        if person is None:
            logger.debug("Person %s not found", person_id)
            raise PersonNotFoundError(person_id)
        return person

    async def create_person(self, data: PersonBase) -> Person:
        """Store a new person under the next free identifier.

        The identifier is ``max(existing ids) + 1`` (1 for an empty
        store); ``created`` and ``updated`` are both set to now.
        """
        self.validate(data)
        with self.store.lock:
            now = _now()
            person = Person(
                id=self.store.next_id(),
                created=now,
                updated=now,
                **data.model_dump(include=set(PersonBase.model_fields)),
            )
            person = self.store.put(person)
        logger.info("Created person %s", person.id)
        return person

    async def replace_person(self, person_id: int, data: PersonBase) -> Person:
        """Replace the person stored under ``person_id`` with ``data``.

        The old record is discarded and the new one appended.  When a
        record existed, its ``created`` timestamp carries over; when it
        did not, this behaves like a create with a caller‑chosen id.
        """
        self.validate(data)
        with self.store.lock:
            now = _now()
            previous = self.store.remove(person_id)
            person = Person(
                id=person_id,
                created=previous.created if previous is not None else now,
                updated=now,
                **data.model_dump(include=set(PersonBase.model_fields)),
            )
            person = self.store.put(person)
        logger.info("Replaced person %s (existed: %s)", person_id, previous is not None)
        return person

    async def merge_person(self, person_id: int, data: PersonBase) -> Person:
        """Copy every field of ``data`` onto the existing person.

        ``id`` and ``created`` are preserved; ``updated`` is refreshed.
        Orders are overwritten along with everything else.
        """
        self.validate(data)
        with self.store.lock:
            existing = self.store.get(person_id)
            if existing is None:
                raise PersonNotFoundError(person_id)
            person = Person(
                id=existing.id,
                created=existing.created,
                updated=max(_now(), existing.updated),
                **data.model_dump(include=set(PersonBase.model_fields)),
            )
            person = self.store.put(person)
        logger.info("Merged update into person %s", person_id)
        return person

    async def delete_person(self, person_id: int) -> None:
        """Remove the person with ``person_id`` or raise ``PersonNotFoundError``."""
        removed = self.store.remove(person_id)
        if removed is None:
            raise PersonNotFoundError(person_id)
        logger.info("Deleted person %s", person_id)
