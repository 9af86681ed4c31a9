"""Person persistence backed by SQLAlchemy."""
from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from solid_api.db.models import EmployeeModel, PersonModel
from solid_api.db.session import get_session
from solid_api.domain.people import Employee, Person


def _model_to_entity(model: PersonModel) -> Person:
    if isinstance(model, EmployeeModel):
        return Employee(
            model.name,
            model.age,
            model.employee_id,
            float(model.salary or 0.0),
            address=model.address,
            id=model.id,
        )
    return Person(model.name, model.age, address=model.address, id=model.id)


def _entity_to_model(person: Person) -> PersonModel:
    if isinstance(person, Employee):
        return EmployeeModel(
            name=person.name,
            age=person.age,
            address=person.address,
            employee_id=person.employee_id,
            salary=person.salary,
        )
    return PersonModel(name=person.name, age=person.age, address=person.address)


class SQLPersonRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def save(self, person: Person) -> Person:
        with get_session() as session:
            if person.id is None:
                model = _entity_to_model(person)
                session.add(model)
            else:
                model = session.get(PersonModel, person.id)
                if model is None:
                    raise ValueError(f"Person {person.id} does not exist")
                expected_kind = "employee" if isinstance(person, Employee) else "person"
                if model.kind != expected_kind:
                    raise ValueError(f"Person {person.id} is stored as {model.kind}, cannot save it as {expected_kind}")
                model.name = person.name
                model.age = person.age
                model.address = person.address
                if isinstance(person, Employee):
                    model.employee_id = person.employee_id
                    model.salary = person.salary
            session.commit()
            session.refresh(model)
            return _model_to_entity(model)

    def get(self, person_id: int) -> Optional[Person]:
        with get_session() as session:
            model = session.get(PersonModel, person_id)
            return _model_to_entity(model) if model else None

    def list_all(self) -> list[Person]:
        with get_session() as session:
            stmt = select(PersonModel).order_by(PersonModel.id)
            return [_model_to_entity(model) for model in session.execute(stmt).scalars().all()]
