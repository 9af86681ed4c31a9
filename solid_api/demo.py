"""Substitutability walkthrough for the Person/Employee hierarchy.

Run with ``python -m solid_api.demo``. The third introduction is the point:
an Employee held in a Person-typed variable still prints its employee id, so
swapping a Person for an Employee changes what callers observe.
"""
from __future__ import annotations

from solid_api.core.config import get_settings
from solid_api.core.logging import configure_logging
from solid_api.domain.people import Employee, Person


def introductions() -> list[str]:
    alice = Person("Alice", 30)
    employee = Employee("Bob", 25, "EMP123")
    bob: Person = Employee("Bob", 25, "EMP123")
    return [alice.introduce(), employee.introduce(), bob.introduce()]


def main() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)
    for text in introductions():
        print(text)


if __name__ == "__main__":
    main()
