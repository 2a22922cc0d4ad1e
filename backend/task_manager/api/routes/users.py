"""User Routes: registration and direct user document access.

Invariants:
    - No route here is gated by a bearer token (PATCH included)
    - Lookups that miss return JSON null with 200, never 404
    - /users/email/{email} is registered before /users/{user_id}
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from task_manager.api.dependencies import get_user_service
from task_manager.core.domain_types import DocumentId
from task_manager.schemas.responses import (
    RegistrationResponse, UpdateSummaryResponse,
)
from task_manager.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=RegistrationResponse, response_model_exclude_none=True,
)
async def register_user(
    document: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """Register a user document and return a bearer token."""
    return await service.register(document)


@router.get("")
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[dict]:
    return await service.list_users()


@router.get("/email/{email}")
async def get_user_by_email(
    email: str, service: UserService = Depends(get_user_service),
) -> dict | None:
    return await service.get_by_email(email)


@router.get("/{user_id}")
async def get_user(
    user_id: str, service: UserService = Depends(get_user_service),
) -> dict | None:
    return await service.get_by_id(DocumentId(user_id))


@router.patch("/{user_id}", response_model=UpdateSummaryResponse)
async def update_user(
    user_id: str,
    fields: dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
):
    """Merge the body into the stored user document."""
    result = await service.update(DocumentId(user_id), fields)
    return result.to_response()
