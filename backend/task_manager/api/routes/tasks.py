"""Task Routes: owner-scoped task CRUD behind the bearer-token gate.

Invariants:
    - verify_token is a router-level dependency, so it runs before any
      database session is opened for the request
    - Handlers see the caller only through CurrentUser.email
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from task_manager.api.dependencies import (
    CurrentUser, get_task_service, verify_token,
)
from task_manager.core.domain_types import DocumentId, Message, STATUS_FIELD
from task_manager.schemas.responses import MessageResponse
from task_manager.services.task_service import TaskService

router = APIRouter(
    prefix="/api/tasks", tags=["tasks"], dependencies=[Depends(verify_token)],
)


@router.get("")
async def list_tasks(
    current_user: CurrentUser = Depends(verify_token),
    service: TaskService = Depends(get_task_service),
) -> list[dict]:
    """Tasks whose `user` field equals the caller's email."""
    return await service.list_tasks(current_user.email)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(
    fields: dict[str, Any] = Body(...),
    current_user: CurrentUser = Depends(verify_token),
    service: TaskService = Depends(get_task_service),
) -> dict:
    return await service.create_task(current_user.email, fields)


@router.put("/{task_id}", response_model=MessageResponse)
async def update_task_status(
    task_id: str,
    body: dict[str, Any] | None = Body(None),
    current_user: CurrentUser = Depends(verify_token),
    service: TaskService = Depends(get_task_service),
):
    """Overwrite `status`; a missing body or field stores null."""
    await service.update_status(
        DocumentId(task_id), current_user.email, (body or {}).get(STATUS_FIELD),
    )
    return MessageResponse(message=Message.TASK_STATUS_UPDATED.value)


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    current_user: CurrentUser = Depends(verify_token),
    service: TaskService = Depends(get_task_service),
):
    await service.delete_task(DocumentId(task_id), current_user.email)
    return MessageResponse(message=Message.TASK_DELETED.value)
