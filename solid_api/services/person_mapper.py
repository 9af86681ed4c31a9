"""Translation from the creation payload to a Person record."""
from __future__ import annotations

from solid_api.domain.people import Person
from solid_api.schemas.person import PersonRequest


def to_person(request: PersonRequest) -> Person:
    """Build an unsaved Person; the id is left for storage to assign."""
    return Person(request.name, request.age, address=request.address)
