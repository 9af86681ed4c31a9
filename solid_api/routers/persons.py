from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from solid_api.schemas.person import PersonRequest, PersonResponse
from solid_api.services.person_service import PersonNotFoundError, PersonService

router = APIRouter(prefix="/api/persons", tags=["persons"])


def _get_person_service(request: Request) -> PersonService:
    svc = getattr(getattr(request.app, "state", None), "person_service", None)
    if not svc:
        raise RuntimeError("PersonService not configured")
    return svc


@router.post("/create", response_model=PersonResponse)
def create_person(payload: PersonRequest, request: Request):
    svc = _get_person_service(request)
    return PersonResponse.model_validate(svc.create_person(payload))


@router.get("", response_model=list[PersonResponse])
def list_persons(request: Request):
    svc = _get_person_service(request)
    return [PersonResponse.model_validate(person) for person in svc.list_persons()]


@router.get("/{person_id}", response_model=PersonResponse)
def get_person(person_id: int, request: Request):
    svc = _get_person_service(request)
    try:
        person = svc.get_person(person_id)
    except PersonNotFoundError:
        raise HTTPException(404, "Person not found")
    return PersonResponse.model_validate(person)
