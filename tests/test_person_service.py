from __future__ import annotations

from dataclasses import replace

import pytest
from sqlalchemy.exc import OperationalError
from structlog.testing import capture_logs

from solid_api.domain.people import Person
from solid_api.repositories.sql_repository import SQLPersonRepository
from solid_api.schemas.person import PersonRequest
from solid_api.services.person_service import PersonNotFoundError, PersonService


class InMemoryPersonRepository:
    def __init__(self) -> None:
        self.rows: dict[int, Person] = {}

    def save(self, person: Person) -> Person:
        stored = person if person.id is not None else replace(person, id=len(self.rows) + 1)
        self.rows[stored.id] = stored
        return stored

    def get(self, person_id: int):
        return self.rows.get(person_id)

    def list_all(self) -> list[Person]:
        return [self.rows[key] for key in sorted(self.rows)]


class BrokenRepository(InMemoryPersonRepository):
    def save(self, person: Person) -> Person:
        raise OperationalError("INSERT INTO person", {}, Exception("database is locked"))


def test_create_person_returns_saved_record(temp_db):
    svc = PersonService(SQLPersonRepository())

    person = svc.create_person(PersonRequest(name="Alice", age=30, address="—"))

    assert person.id is not None
    assert (person.name, person.age, person.address) == ("Alice", 30, "—")
    assert svc.get_person(person.id) == person


def test_create_person_uses_injected_repository():
    repo = InMemoryPersonRepository()
    svc = PersonService(repo)

    with capture_logs() as logs:
        person = svc.create_person(PersonRequest(name="Alice", age=30, address="Rua 1"))

    assert repo.rows == {1: person}
    assert {"event": "person_created", "person_id": 1, "log_level": "info"} in logs


def test_storage_failure_propagates_unchanged():
    svc = PersonService(BrokenRepository())
    with pytest.raises(OperationalError):
        svc.create_person(PersonRequest(name="Alice", age=30, address="Rua 1"))


def test_get_person_missing_raises():
    svc = PersonService(InMemoryPersonRepository())
    with pytest.raises(PersonNotFoundError) as excinfo:
        svc.get_person(42)
    assert excinfo.value.person_id == 42


def test_list_persons_in_id_order():
    svc = PersonService(InMemoryPersonRepository())
    svc.create_person(PersonRequest(name="Alice", age=30, address="a"))
    svc.create_person(PersonRequest(name="Bob", age=25, address="b"))

    assert [p.name for p in svc.list_persons()] == ["Alice", "Bob"]


def test_service_requires_an_injected_repository():
    import solid_api.services.person_service as person_service

    with pytest.raises(TypeError):
        PersonService()  # type: ignore[call-arg]
    assert not hasattr(person_service, "SQLPersonRepository")
