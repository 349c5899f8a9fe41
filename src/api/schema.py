"""
GraphQL contract: Person and Address types, the YesNo enum, Query and Mutation.

Argument and result shapes here are the wire contract. Resolvers delegate to the
application services found in the execution context (see build_context).
"""

import strawberry
from graphql import GraphQLError
from strawberry.types import Info

from persons.application import (
    NameNotUnique,
    PersonMutationService,
    PersonQueryService,
    PersonRepository,
    project_address,
)
from persons.domain import Person
from persons.domain import YesNo as DomainYesNo

YesNo = strawberry.enum(DomainYesNo, name="YesNo")


@strawberry.type(name="Address")
class AddressType:
    street: str
    city: str


@strawberry.type(name="Person")
class PersonType:
    name: str
    phone: str | None
    source: strawberry.Private[Person]

    @strawberry.field
    def address(self) -> AddressType:
        """Derived from the stored street and city when the response is built."""
        address = project_address(self.source)
        return AddressType(street=address.street, city=address.city)

    @strawberry.field
    def id(self) -> strawberry.ID:
        return strawberry.ID(self.source.id)

    @classmethod
    def from_domain(cls, person: Person) -> "PersonType":
        return cls(name=person.name, phone=person.phone, source=person)


def build_context(repository: PersonRepository) -> dict:
    """Context for one execution: services bound to the shared repository."""
    return {
        "queries": PersonQueryService(repository),
        "mutations": PersonMutationService(repository),
    }


def _queries(info: Info) -> PersonQueryService:
    return info.context["queries"]


def _mutations(info: Info) -> PersonMutationService:
    return info.context["mutations"]


@strawberry.type
class Query:
    @strawberry.field
    def person_count(self, info: Info) -> int:
        return _queries(info).person_count()

    @strawberry.field
    def all_persons(
        self, info: Info, phone: YesNo | None = None
    ) -> list[PersonType]:
        return [PersonType.from_domain(p) for p in _queries(info).all_persons(phone)]

    @strawberry.field
    def find_person(self, info: Info, name: str) -> PersonType | None:
        person = _queries(info).find_person(name)
        if person is None:
            return None
        return PersonType.from_domain(person)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_person(
        self,
        info: Info,
        name: str,
        city: str,
        street: str,
        phone: str | None = None,
    ) -> PersonType | None:
        # id is never an argument: the service generates it
        try:
            person = _mutations(info).create_person(
                name=name, city=city, street=street, phone=phone
            )
        except NameNotUnique as exc:
            raise GraphQLError(
                str(exc),
                extensions={"code": exc.code, "invalidArgs": exc.invalid_args},
            ) from exc
        return PersonType.from_domain(person)

    @strawberry.mutation
    def update_phone(self, info: Info, name: str, phone: str) -> PersonType | None:
        person = _mutations(info).update_phone(name=name, phone=phone)
        if person is None:
            return None
        return PersonType.from_domain(person)


schema = strawberry.Schema(query=Query, mutation=Mutation)
