"""
Persistence adapters.

Services depend on the PersonRepository protocol; SQLPersonRepository is the
relational implementation.
"""

from .base import PersonRepository
from .sql_repository import SQLPersonRepository

__all__ = ["PersonRepository", "SQLPersonRepository"]
