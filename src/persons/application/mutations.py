"""Writes to the roster: create a person, update a phone number."""

import logging

from persons.application.errors import NameNotUnique
from persons.application.ports import PersonRepository
from persons.domain import Person

logger = logging.getLogger(__name__)


class PersonMutationService:
    """Validates then commits. Check and write run without yielding in between."""

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    def create_person(
        self,
        name: str,
        city: str,
        street: str,
        phone: str | None = None,
        *,
        zip_code: int | None = None,
    ) -> Person:
        """Add a new person with a freshly generated id.

        Raises NameNotUnique if a person with the same name already exists;
        the roster is left untouched in that case.
        """
        if self._repo.find_by_name(name) is not None:
            logger.info("Rejected createPerson: name %r already exists", name)
            raise NameNotUnique(name)

        person = Person(
            name=name,
            phone=phone,
            street=street,
            city=city,
            zip_code=zip_code,
        )
        self._repo.append(person)
        logger.info("Created person %s (%r)", person.id, person.name)
        return person

    def update_phone(self, name: str, phone: str) -> Person | None:
        """Replace the phone of the person called `name`. None if there is none."""
        existing = self._repo.find_by_name(name)
        if existing is None:
            logger.info("updatePhone: no person named %r", name)
            return None

        updated = existing.with_phone(phone)
        self._repo.replace_where(lambda p: p.name == name, updated)
        logger.info("Updated phone of person %s (%r)", updated.id, updated.name)
        return updated
