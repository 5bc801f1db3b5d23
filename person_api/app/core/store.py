"""
In‑memory person store.

``PersonStore`` maps person identifiers to ``Person`` records.  One
store is created per application by ``create_app`` and handed to
request handlers through the ``get_store`` dependency.  A single
re‑entrant lock serialises every mutation; services that need a
read‑modify‑write sequence (id assignment, merge) hold ``store.lock``
around the whole sequence.  Records handed out by the store are deep
copies, so callers can never mutate stored state in place.
"""

import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from fastapi import Request

from ..schemas.person import Person


class PersonStore:
    """Thread‑safe mapping of person id to ``Person``."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._people: Dict[int, Person] = {}

    def __len__(self) -> int:
        with self.lock:
            return len(self._people)

    def __contains__(self, person_id: object) -> bool:
        with self.lock:
            return person_id in self._people

    def list(self) -> List[Person]:
        """Return copies of all persons in insertion order."""
        with self.lock:
            return [p.model_copy(deep=True) for p in self._people.values()]

    def get(self, person_id: int) -> Optional[Person]:
        with self.lock:
            person = self._people.get(person_id)
            return person.model_copy(deep=True) if person is not None else None

    def next_id(self) -> int:
        """``max(existing ids) + 1``, or 1 for an empty store."""
        with self.lock:
            return max(self._people, default=0) + 1

    def put(self, person: Person) -> Person:
        """Insert or overwrite the record stored under ``person.id``.

        An overwritten record keeps its position; a new one is appended.
        """
        stored = person.model_copy(deep=True)
        with self.lock:
            self._people[stored.id] = stored
        return stored.model_copy(deep=True)

    def remove(self, person_id: int) -> Optional[Person]:
        """Remove and return the record with ``person_id``, if any."""
        with self.lock:
            return self._people.pop(person_id, None)

    def clear(self) -> None:
        with self.lock:
            self._people.clear()


def _sample_people() -> List[Person]:
    now = datetime.now(timezone.utc)
    return [
        Person(
            id=1, status="Active", created=now, updated=now,
            first_name="Hiro", last_name="Protagonist", email_address="deliverator@mrlees.com",
            address_line1="123 Any St.", address_line2="Apt 456", city="Los Angeles", state="California",
            zip_code="12345",
        ),
        Person(
            id=2, status="Active", created=now, updated=now,
            first_name="Yours", last_name="Truly", email_address="yt@enzos.com",
            address_line1="456 Other St.", address_line2="Apt 123", city="Los Angeles", state="California",
            zip_code="12345",
        ),
    ]


def init_store(store: PersonStore) -> None:
    """Load the sample persons into ``store``.

    Existing records with the same ids are left untouched, so calling
    this twice is harmless.
    """
    with store.lock:
        for person in _sample_people():
            if person.id not in store:
                store.put(person)


def get_store(request: Request) -> PersonStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
