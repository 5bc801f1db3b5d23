"""
Person endpoints for API v1.

CRUD over the in‑memory person store.  ``PUT`` replaces a record
(creating it when absent), while ``PATCH`` copies every supplied
field onto an existing record and fails with 404 when there is none.
Malformed bodies are rejected with 400 by the application's
validation handler before a handler runs.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from person_api.app.core.exceptions import PersonNotFoundError, PersonValidationError
from person_api.app.core.store import PersonStore, get_store
from person_api.app.schemas.person import Person, PersonCreate
from person_api.app.services.person_service import PersonService

router = APIRouter()


def get_person_service(request: Request, store: PersonStore = Depends(get_store)) -> PersonService:
    return PersonService(store, empty_list_not_found=request.app.state.settings.empty_list_not_found)


@router.get("", response_model=List[Person])
async def list_people(service: PersonService = Depends(get_person_service)) -> List[Person]:
    """Return all persons.

    Responds with 404 when the store is empty, unless the
    ``EMPTY_LIST_NOT_FOUND`` setting is turned off.
    """
    try:
        return await service.list_people()
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/{person_id}", response_model=Person)
async def get_person(person_id: int, service: PersonService = Depends(get_person_service)) -> Person:
    """Retrieve a single person by ID."""
    try:
        return await service.get_person(person_id)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", response_model=Person)
async def create_person(
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Create a person; the identifier and timestamps are assigned here."""
    try:
        return await service.create_person(person_in)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.put("/{person_id}", response_model=Person)
async def replace_person(
    person_id: int,
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Replace the person stored under ``person_id``."""
    try:
        return await service.replace_person(person_id, person_in)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.patch("/{person_id}", response_model=Person)
async def merge_person(
    person_id: int,
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Overwrite all mutable fields of an existing person."""
    try:
        return await service.merge_person(person_id, person_in)
    except PersonValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{person_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_person(person_id: int, service: PersonService = Depends(get_person_service)) -> Response:
    """Delete a person; the response has no body."""
    try:
        await service.delete_person(person_id)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)
