"""Infrastructure layer: concrete implementations of application ports."""

from persons.infrastructure.memory_repository import InMemoryPersonRepository
from persons.infrastructure.seed import SEED_PERSONS, seeded_repository

__all__ = [
    "InMemoryPersonRepository",
    "SEED_PERSONS",
    "seeded_repository",
]
