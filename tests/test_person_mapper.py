from __future__ import annotations

import pytest
from pydantic import ValidationError

from solid_api.domain.people import Person
from solid_api.schemas.person import PersonRequest
from solid_api.services.person_mapper import to_person


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Alice", "age": 30, "address": "—"},
        {"name": "Carol", "age": 0, "address": "Av. Paulista, 1000"},
    ],
)
def test_to_person_copies_fields_and_leaves_id_unset(payload):
    person = to_person(PersonRequest(**payload))

    assert type(person) is Person
    assert person.id is None
    assert (person.name, person.age, person.address) == (payload["name"], payload["age"], payload["address"])


@pytest.mark.parametrize(
    "payload",
    [
        {"age": 30, "address": "x"},
        {"name": "  ", "age": 30, "address": "x"},
        {"name": "Alice", "age": -1, "address": "x"},
        {"name": "Alice", "age": 151, "address": "x"},
        {"name": "Alice", "age": 10**20, "address": "x"},
        {"name": "Alice", "age": 30},
        {"name": "Alice", "age": 30, "address": "x", "id": 7},
    ],
)
def test_request_rejects_malformed_payloads(payload):
    with pytest.raises(ValidationError):
        PersonRequest(**payload)
