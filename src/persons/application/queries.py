"""Read-only operations over the roster: count, filtered list, lookup by name."""

from persons.application.ports import PersonRepository
from persons.domain import Person, YesNo


class PersonQueryService:
    """Answers queries against the repository. Never writes."""

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    def person_count(self) -> int:
        return self._repo.count()

    def all_persons(self, phone: YesNo | None = None) -> list[Person]:
        """Return persons in roster order, optionally filtered on having a phone.

        YES keeps persons with a phone on file, NO keeps those without one,
        None keeps everyone. An empty phone string counts as no phone.
        """
        persons = list(self._repo.all())
        if phone is None:
            return persons
        if phone is YesNo.YES:
            return [p for p in persons if p.phone]
        return [p for p in persons if not p.phone]

    def find_person(self, name: str) -> Person | None:
        return self._repo.find_by_name(name)
