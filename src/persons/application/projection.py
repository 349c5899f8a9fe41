"""Derived views built from a Person's stored fields."""

from persons.domain import Address, Person


def project_address(person: Person) -> Address:
    return Address(street=person.street, city=person.city)
