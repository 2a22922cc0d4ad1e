"""Task Service: owner-scoped task operations.

Invariants:
    - Every operation is scoped by the authenticated email
    - Zero matches on update/delete raise TaskNotFoundError, which covers both
      "no such task" and "task owned by someone else"
"""

import logging
from typing import Any

from task_manager.core.documents import build_task
from task_manager.core.domain_types import DocumentId, Email, ID_FIELD
from task_manager.core.errors import ErrorContext, TaskNotFoundError
from task_manager.core.repository_protocols import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    async def list_tasks(self, owner: Email) -> list[dict]:
        return await self._tasks.list_by_owner(owner)

    async def create_task(self, owner: Email, fields: dict[str, Any]) -> dict:
        task = await self._tasks.insert(build_task(fields, owner))
        logger.info(
            "Task created",
            extra={"document_id": task[ID_FIELD], "user_email": owner},
        )
        return task

    async def update_status(
        self, task_id: DocumentId, owner: Email, status: Any,
    ) -> None:
        result = await self._tasks.update_status(task_id, owner, status)
        if result.matched_count == 0:
            raise TaskNotFoundError(task_id, ErrorContext(user_email=owner))
        logger.info(
            "Task status updated",
            extra={"document_id": task_id, "user_email": owner},
        )

    async def delete_task(self, task_id: DocumentId, owner: Email) -> None:
        result = await self._tasks.delete(task_id, owner)
        if result.deleted_count == 0:
            raise TaskNotFoundError(task_id, ErrorContext(user_email=owner))
        logger.info(
            "Task deleted",
            extra={"document_id": task_id, "user_email": owner},
        )
