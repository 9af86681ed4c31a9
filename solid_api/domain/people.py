"""Person/Employee records and the salary capability.

``Employee`` extends ``Person`` without touching it (open for extension). Two
behaviors are intentionally kept as counter-examples and covered by tests:

- ``Employee.introduce`` adds an employee-id line, so an Employee seen through
  a Person-typed variable does not introduce itself like a Person would.
- ``Person.calculate_salary`` exists on every record even though only
  employees have salary data; it answers a placeholder and logs a warning.

``Compensable`` is the narrow alternative: ask whether a record has the
capability instead of calling a method every record is forced to carry.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger(__name__)

SALARY_PLACEHOLDER = 0.0


@dataclass(frozen=True)
class Person:
    name: str
    age: int
    address: Optional[str] = field(default=None, kw_only=True)
    id: Optional[int] = field(default=None, kw_only=True)

    @property
    def full_name(self) -> str:
        return self.name

    def introduce(self) -> str:
        return f"Hello, I am {self.name} and I am {self.age} years old."

    def describe(self) -> str:
        return f"Name: {self.name}\nAge: {self.age}"

    def describe_with_address(self) -> str:
        """Same as ``describe`` plus the address: one more reason for this method to change."""
        return f"{self.describe()}\nAddress: {self.address}"

    def calculate_salary(self) -> float:
        logger.warning("salary_not_implemented", person=self.name, kind=type(self).__name__)
        return SALARY_PLACEHOLDER


@dataclass(frozen=True)
class Employee(Person):
    employee_id: str
    salary: float = 0.0

    def introduce(self) -> str:
        return f"{super().introduce()}\nEmployee ID: {self.employee_id}"

    def calculate_salary(self) -> float:
        return self.salary


@runtime_checkable
class Compensable(Protocol):
    """Records that actually carry salary data."""

    salary: float

    def calculate_salary(self) -> float: ...


def is_compensable(record: object) -> bool:
    return isinstance(record, Compensable)


def salary_of(record: object) -> Optional[float]:
    """Salary for compensable records, None for everything else (never logs)."""
    if is_compensable(record):
        return record.calculate_salary()
    return None
