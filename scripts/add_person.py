#!/usr/bin/env python3
"""
Create one person directly in the configured database.

Usage:
  python scripts/add_person.py --name Alice --age 30 --address "Rua 1"
"""
from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from solid_api.core.config import get_settings
from solid_api.core.logging import configure_logging
from solid_api.db.create_tables import create_all
from solid_api.repositories.sql_repository import SQLPersonRepository
from solid_api.schemas.person import PersonRequest
from solid_api.services.person_service import PersonService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a person record")
    ap.add_argument("--name", required=True, help="Full name")
    ap.add_argument("--age", required=True, type=int, help="Age in years")
    ap.add_argument("--address", required=True, help="Postal address")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)
    try:
        request = PersonRequest(name=args.name, age=args.age, address=args.address)
    except ValidationError as exc:
        raise SystemExit(f"Invalid person: {exc}")

    if settings.auto_create_tables:
        create_all()
    person = PersonService(SQLPersonRepository()).create_person(request)
    print("OK: person created")
    print(f"  ID: {person.id}")
    print(f"  Name: {person.name}")
    print(f"  Age: {person.age}")
    print(f"  Address: {person.address}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
