"""In-memory implementation of PersonRepository (no DB)."""

import logging
from collections.abc import Callable, Iterable

from persons.domain import Person

logger = logging.getLogger(__name__)


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion.
    The roster is an immutable tuple; writes build a new tuple and swap the
    reference, so snapshots handed out by all() never change underneath a reader.
    """

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: tuple[Person, ...] = tuple(persons)

    def count(self) -> int:
        return len(self._persons)

    def all(self) -> tuple[Person, ...]:
        return self._persons

    def find_by_name(self, name: str) -> Person | None:
        for person in self._persons:
            if person.name == name:
                return person
        return None

    def append(self, person: Person) -> None:
        self._persons = self._persons + (person,)

    def replace_where(
        self, predicate: Callable[[Person], bool], updated: Person
    ) -> None:
        self._persons = tuple(
            updated if predicate(person) else person for person in self._persons
        )
