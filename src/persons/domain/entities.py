"""Domain entities: Person, its Address projection, and the YesNo filter."""

import uuid
from dataclasses import dataclass, field
from enum import Enum


class YesNo(Enum):
    """Phone filter for person listings. Omitting it selects everyone."""

    YES = "YES"
    NO = "NO"


@dataclass(frozen=True)
class Address:
    """
    Where a Person lives, as exposed to clients.
    Not stored on its own: always derived from the Person's street and city.
    """

    street: str
    city: str


@dataclass(frozen=True)
class Person:
    """
    Represents one contact in the roster.
    The name is the business key and must be unique; the id is assigned on
    creation and never changes.
    zip_code is None for persons created through the API, which takes no zip code.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = field(default="")
    phone: str | None = None
    street: str = field(default="")
    city: str = field(default="")
    zip_code: int | None = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Person id must be non-empty.")

    def with_phone(self, phone: str | None) -> "Person":
        """Return a copy of this person with only the phone replaced."""
        return Person(
            id=self.id,
            name=self.name,
            phone=phone,
            street=self.street,
            city=self.city,
            zip_code=self.zip_code,
        )
