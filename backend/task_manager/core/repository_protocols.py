"""Boundary Protocols: contracts between services and storage.

Invariants:
    - Services depend on these Protocols, never on SQLAlchemy models
    - Documents cross the boundary as plain dicts with `_id` first
    - Each method is a single storage operation (no multi-step transactions)
"""

from typing import Any, Protocol

from task_manager.core.documents import DeleteResult, UpdateResult
from task_manager.core.domain_types import DocumentId, Email


class UserRepository(Protocol):
    """Contract for user document persistence."""
    async def find_by_email(self, email: Any) -> dict | None: ...
    async def insert(self, document: dict[str, Any]) -> dict: ...
    async def list_all(self) -> list[dict]: ...
    async def get(self, user_id: DocumentId) -> dict | None: ...
    async def update_fields(
        self, user_id: DocumentId, fields: dict[str, Any],
    ) -> UpdateResult: ...


class TaskRepository(Protocol):
    """Contract for task document persistence, always scoped by owner."""
    async def list_by_owner(self, owner: Email) -> list[dict]: ...
    async def insert(self, document: dict[str, Any]) -> dict: ...
    async def update_status(
        self, task_id: DocumentId, owner: Email, status: Any,
    ) -> UpdateResult: ...
    async def delete(self, task_id: DocumentId, owner: Email) -> DeleteResult: ...
