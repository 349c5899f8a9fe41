"""Application layer: query and mutation services, ports, errors. Depends only on domain."""

from persons.application.errors import BAD_USER_INPUT, NameNotUnique, PersonsError
from persons.application.mutations import PersonMutationService
from persons.application.ports import PersonRepository
from persons.application.projection import project_address
from persons.application.queries import PersonQueryService

__all__ = [
    "BAD_USER_INPUT",
    "NameNotUnique",
    "PersonMutationService",
    "PersonQueryService",
    "PersonRepository",
    "PersonsError",
    "project_address",
]
