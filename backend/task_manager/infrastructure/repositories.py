"""SQL Repositories: UserRepository / TaskRepository implemented over AsyncSession.

Invariants:
    - One public method = one statement + commit (no cross-document transactions)
    - Task reads and writes always filter on owner_email alongside the id
    - JSON bodies are replaced, never mutated in place (change tracking)
"""

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.core.documents import (
    DeleteResult, UpdateResult, apply_set, email_key, strip_id,
)
from task_manager.core.domain_types import (
    DocumentId, EMAIL_FIELD, Email, OWNER_FIELD, STATUS_FIELD,
)
from task_manager.models.task_document import TaskDocument
from task_manager.models.user_document import UserDocument

logger = logging.getLogger(__name__)


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_by_email(self, email: Any) -> dict | None:
        if isinstance(email, str):
            result = await self._db.execute(
                select(UserDocument)
                .where(UserDocument.email == email)
                .order_by(UserDocument.created_at)
                .limit(1),
            )
            row = result.scalar_one_or_none()
            return row.to_document() if row else None

        # Non-string emails are not mirrored; compare the stored body value.
        result = await self._db.execute(
            select(UserDocument)
            .where(UserDocument.email.is_(None))
            .order_by(UserDocument.created_at),
        )
        for row in result.scalars():
            if row.body.get(EMAIL_FIELD) == email:
                return row.to_document()
        return None

    async def insert(self, document: dict[str, Any]) -> dict:
        body = strip_id(document)
        row = UserDocument(email=email_key(body), body=body)
        self._db.add(row)
        await self._db.commit()
        logger.info("User inserted", extra={"document_id": row.id})
        return row.to_document()

    async def list_all(self) -> list[dict]:
        result = await self._db.execute(
            select(UserDocument).order_by(UserDocument.created_at),
        )
        return [row.to_document() for row in result.scalars().all()]

    async def get(self, user_id: DocumentId) -> dict | None:
        row = await self._db.get(UserDocument, user_id)
        return row.to_document() if row else None

    async def update_fields(
        self, user_id: DocumentId, fields: dict[str, Any],
    ) -> UpdateResult:
        row = await self._db.get(UserDocument, user_id)
        if row is None:
            return UpdateResult(matched_count=0, modified_count=0)
        merged = apply_set(row.id, row.body, fields)
        if merged == row.body:
            return UpdateResult(matched_count=1, modified_count=0)
        row.body = merged
        row.email = email_key(merged)
        await self._db.commit()
        logger.info("User updated", extra={"document_id": row.id})
        return UpdateResult(matched_count=1, modified_count=1)


class SqlTaskRepository:
    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_by_owner(self, owner: Email) -> list[dict]:
        result = await self._db.execute(
            select(TaskDocument)
            .where(TaskDocument.owner_email == owner)
            .order_by(TaskDocument.created_at),
        )
        return [row.to_document() for row in result.scalars().all()]

    async def insert(self, document: dict[str, Any]) -> dict:
        """Insert a task built by core.documents.build_task."""
        row = TaskDocument(owner_email=document[OWNER_FIELD], body=strip_id(document))
        self._db.add(row)
        await self._db.commit()
        return row.to_document()

    async def update_status(
        self, task_id: DocumentId, owner: Email, status: Any,
    ) -> UpdateResult:
        row = await self._get_owned(task_id, owner)
        if row is None:
            return UpdateResult(matched_count=0, modified_count=0)
        if row.body.get(STATUS_FIELD) == status and STATUS_FIELD in row.body:
            return UpdateResult(matched_count=1, modified_count=0)
        row.body = {**row.body, STATUS_FIELD: status}
        await self._db.commit()
        return UpdateResult(matched_count=1, modified_count=1)

    async def delete(self, task_id: DocumentId, owner: Email) -> DeleteResult:
        result = await self._db.execute(
            delete(TaskDocument).where(
                TaskDocument.id == task_id,
                TaskDocument.owner_email == owner,
            ),
        )
        await self._db.commit()
        return DeleteResult(deleted_count=result.rowcount)

    async def _get_owned(
        self, task_id: DocumentId, owner: Email,
    ) -> TaskDocument | None:
        result = await self._db.execute(
            select(TaskDocument).where(
                TaskDocument.id == task_id,
                TaskDocument.owner_email == owner,
            ),
        )
        return result.scalar_one_or_none()
