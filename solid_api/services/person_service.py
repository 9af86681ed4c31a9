"""Person use cases (create, lookup)."""

from __future__ import annotations

import structlog

from solid_api.domain.people import Person
from solid_api.repositories.base import PersonRepository
from solid_api.schemas.person import PersonRequest
from solid_api.services.person_mapper import to_person

logger = structlog.get_logger(__name__)


class PersonError(Exception):
    """Base exception for person workflows."""


class PersonNotFoundError(PersonError):
    """Raised when no stored record has the requested id."""

    def __init__(self, person_id: int):
        super().__init__(f"Person {person_id} not found")
        self.person_id = person_id


class PersonService:
    """Creates and reads people through an injected repository.

    The service only maps and delegates: HTTP concerns stay in the router and
    storage concerns stay in the repository. Storage errors are not caught here.
    """

    def __init__(self, repository: PersonRepository) -> None:
        self.repository = repository

    def create_person(self, request: PersonRequest) -> Person:
        person = self.repository.save(to_person(request))
        logger.info("person_created", person_id=person.id)
        return person

    def get_person(self, person_id: int) -> Person:
        person = self.repository.get(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    def list_persons(self) -> list[Person]:
        return self.repository.list_all()
