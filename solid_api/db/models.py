"""SQLAlchemy models for people and employees (joined-table inheritance)."""
from __future__ import annotations

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text

from .session import Base


class PersonModel(Base):
    __tablename__ = "person"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    address = Column(Text, nullable=True)
    kind = Column(String(32), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": kind,
        "polymorphic_identity": "person",
    }


class EmployeeModel(PersonModel):
    __tablename__ = "employee"

    id = Column(Integer, ForeignKey("person.id", ondelete="CASCADE"), primary_key=True)
    employee_id = Column(String(64), nullable=False)
    salary = Column(Float, nullable=False, default=0.0)

    __mapper_args__ = {
        "polymorphic_identity": "employee",
    }
