"""Domain records (Person/Employee) free of FastAPI and SQLAlchemy imports."""

from .people import Compensable, Employee, Person, is_compensable, salary_of

__all__ = ["Compensable", "Employee", "Person", "is_compensable", "salary_of"]
