"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable, Sequence
from typing import Protocol

from persons.domain import Person


class PersonRepository(Protocol):
    """Holds the roster of Person records in insertion order."""

    def count(self) -> int:
        """Return the number of stored persons."""
        ...

    def all(self) -> Sequence[Person]:
        """Return a snapshot of every person: seed order, then creations."""
        ...

    def find_by_name(self, name: str) -> Person | None:
        """Return the first person whose name equals `name` exactly, or None."""
        ...

    def append(self, person: Person) -> None:
        """Add a person at the end of the roster."""
        ...

    def replace_where(
        self, predicate: Callable[[Person], bool], updated: Person
    ) -> None:
        """Swap in a new roster where every match of `predicate` is `updated`."""
        ...
