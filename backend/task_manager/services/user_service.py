"""User Service: registration and direct user document access.

Invariants:
    - Registration always yields a fresh token, whether or not the user exists
    - Duplicate detection is read-before-write on the raw email value (not race-free)
    - Updates merge caller fields without a whitelist
"""

import logging
from typing import Any

from task_manager.core.documents import UpdateResult
from task_manager.core.domain_types import DocumentId, EMAIL_FIELD, Message
from task_manager.core.repository_protocols import UserRepository
from task_manager.infrastructure.tokens import TokenIssuer

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository, tokens: TokenIssuer):
        self._users = users
        self._tokens = tokens

    async def register(self, document: dict[str, Any]) -> dict:
        """Return `{token}` for a new user or `{message, token}` for a known email."""
        token = self._tokens.issue(document.get(EMAIL_FIELD))
        email = document.get(EMAIL_FIELD)
        if await self._users.find_by_email(email):
            logger.info(
                "Registration for existing user", extra={"user_email": email},
            )
            return {"message": Message.USER_EXISTS.value, "token": token}
        await self._users.insert(document)
        logger.info("User registered", extra={"user_email": email})
        return {"token": token}

    async def list_users(self) -> list[dict]:
        return await self._users.list_all()

    async def get_by_email(self, email: str) -> dict | None:
        return await self._users.find_by_email(email)

    async def get_by_id(self, user_id: DocumentId) -> dict | None:
        return await self._users.get(user_id)

    async def update(
        self, user_id: DocumentId, fields: dict[str, Any],
    ) -> UpdateResult:
        return await self._users.update_fields(user_id, fields)
