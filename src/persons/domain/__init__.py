"""Domain layer: entities and value objects. No dependencies on outer layers."""

from persons.domain.entities import Address, Person, YesNo

__all__ = ["Address", "Person", "YesNo"]
