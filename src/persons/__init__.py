"""
Persons core: clean-architecture layout.

- domain: entities (Person, Address, YesNo). No outer dependencies.
- application: query and mutation services, ports (PersonRepository), errors.
- infrastructure: adapters (InMemoryPersonRepository, seed roster).
"""

from persons.application import (
    BAD_USER_INPUT,
    NameNotUnique,
    PersonMutationService,
    PersonQueryService,
    PersonRepository,
    PersonsError,
    project_address,
)
from persons.domain import Address, Person, YesNo
from persons.infrastructure import InMemoryPersonRepository, seeded_repository

__all__ = [
    "Address",
    "BAD_USER_INPUT",
    "InMemoryPersonRepository",
    "NameNotUnique",
    "Person",
    "PersonMutationService",
    "PersonQueryService",
    "PersonRepository",
    "PersonsError",
    "YesNo",
    "project_address",
    "seeded_repository",
]
