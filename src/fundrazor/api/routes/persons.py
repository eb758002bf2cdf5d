"""REST API endpoints for donor records.

Reads are public; create, update and delete require an authenticated user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from src.fundrazor.api.deps import get_current_user
from src.fundrazor.people.schemas import PersonCreate, PersonRead, PersonUpdate
from src.fundrazor.people.service import PersonService
from src.fundrazor.users.schemas import UserRead

router = APIRouter(prefix="/persons", tags=["persons"])


def _get_person_service(request: Request) -> PersonService:
    """Retrieve PersonService from app.state, 503 if not available."""
    service = getattr(request.app.state, "person_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Person service not initialized",
        )
    return service


@router.get("", response_model=list[PersonRead])
async def list_persons(
    request: Request,
    search: str | None = Query(default=None),
) -> list[PersonRead]:
    """List persons by name; ?search= matches first name, last name or email."""
    service = _get_person_service(request)
    return await service.list_persons(search)


@router.get("/{person_id}", response_model=PersonRead)
async def get_person(person_id: str, request: Request) -> PersonRead:
    service = _get_person_service(request)
    return await service.get_person(person_id)


@router.post("", response_model=PersonRead, status_code=201)
async def create_person(
    body: PersonCreate,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> PersonRead:
    service = _get_person_service(request)
    return await service.create_person(body)


@router.patch("/{person_id}", response_model=PersonRead)
async def update_person(
    person_id: str,
    body: PersonUpdate,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> PersonRead:
    service = _get_person_service(request)
    return await service.update_person(person_id, body)


@router.delete("/{person_id}", response_model=PersonRead)
async def delete_person(
    person_id: str,
    request: Request,
    user: UserRead = Depends(get_current_user),
) -> PersonRead:
    """Delete a person; their interactions and opportunities go with them."""
    service = _get_person_service(request)
    return await service.delete_person(person_id)
