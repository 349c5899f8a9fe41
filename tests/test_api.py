"""API tests: /health and the GraphQL endpoint over HTTP."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from persons.infrastructure import seeded_repository


@pytest.fixture
def client():
    app.state.repository = seeded_repository()
    with TestClient(app) as test_client:
        yield test_client
    app.state.repository = None


def _graphql(client, query, **variables):
    r = client.post("/graphql", json={"query": query, "variables": variables})
    assert r.status_code == 200
    return r.json()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_person_count(client):
    body = _graphql(client, "{ personCount }")
    assert body == {"data": {"personCount": 3}}


def test_create_then_find_over_http(client):
    created = _graphql(
        client,
        """
        mutation ($name: String!, $city: String!, $street: String!) {
          createPerson(name: $name, city: $city, street: $street, phone: "040-1234") { id }
        }
        """,
        name="Ada Lovelace",
        city="London",
        street="St James Square",
    )
    person_id = created["data"]["createPerson"]["id"]

    found = _graphql(
        client,
        'query { findPerson(name: "Ada Lovelace") { id phone address { city } } }',
    )
    assert found["data"]["findPerson"] == {
        "id": person_id,
        "phone": "040-1234",
        "address": {"city": "London"},
    }
    assert _graphql(client, "{ personCount }")["data"]["personCount"] == 4


def test_duplicate_create_error_payload(client):
    body = _graphql(
        client,
        'mutation { createPerson(name: "John Doe", city: "Dell", street: "X") { id } }',
    )
    assert body["data"] == {"createPerson": None}
    assert body["errors"][0]["message"] == "Name must be unique"
    assert body["errors"][0]["extensions"] == {
        "code": "BAD_USER_INPUT",
        "invalidArgs": "John Doe",
    }


def test_state_is_shared_across_requests(client):
    _graphql(
        client,
        'mutation { updatePhone(name: "John Doe", phone: "214-21453") { phone } }',
    )
    body = _graphql(client, "{ allPersons(phone: NO) { name } }")
    assert body == {"data": {"allPersons": []}}
