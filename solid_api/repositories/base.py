"""Repository abstraction the service layer depends on."""
from __future__ import annotations

from typing import Optional, Protocol

from solid_api.domain.people import Person


class PersonRepository(Protocol):
    """Persists and retrieves Person records; holds no policy of its own."""

    def save(self, person: Person) -> Person:
        """Insert (no id) or update (with id); return the record carrying its id."""
        ...

    def get(self, person_id: int) -> Optional[Person]:
        ...

    def list_all(self) -> list[Person]:
        ...
