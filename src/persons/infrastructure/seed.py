"""Initial roster loaded at process start."""

from persons.domain import Person
from persons.infrastructure.memory_repository import InMemoryPersonRepository

SEED_PERSONS: tuple[Person, ...] = (
    Person(
        id="4d5928-1234-423bc-1248523a8df0",
        name="Francis Nguyen",
        phone="230-12345",
        street="Kale 24 Ave",
        city="Esperanza",
        zip_code=4215,
    ),
    Person(
        id="1c58-24312-124125h802a93",
        name="John Doe",
        street="Tool Kit Six",
        city="Dell",
        zip_code=4524,
    ),
    Person(
        id="9c3a-53281-52382-1f93295410",
        name="Jane Doe",
        phone="124-52312",
        street="Mundane Telephone",
        city="Triumph",
        zip_code=4502,
    ),
)


def seeded_repository() -> InMemoryPersonRepository:
    """Return a fresh repository holding the seed roster."""
    return InMemoryPersonRepository(SEED_PERSONS)
