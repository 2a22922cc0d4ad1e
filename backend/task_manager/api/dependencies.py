"""Dependency Wiring: services, repositories and the bearer-token gate.

Invariants:
    - verify_token reads only the Authorization header and the signing secret;
      it never opens a database session
    - Any token failure surfaces as AccessDeniedError (403, fixed message)
"""

from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from task_manager.core.domain_types import EMAIL_FIELD, Email
from task_manager.core.errors import AccessDeniedError
from task_manager.infrastructure.database import get_db
from task_manager.infrastructure.repositories import (
    SqlTaskRepository, SqlUserRepository,
)
from task_manager.infrastructure.tokens import TokenIssuer, get_token_issuer
from task_manager.services.task_service import TaskService
from task_manager.services.user_service import UserService

BEARER_SCHEME = "bearer"


@dataclass(frozen=True)
class CurrentUser:
    """Caller identity decoded from a verified bearer token."""
    email: Email
    claims: dict


def extract_bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise AccessDeniedError("missing Authorization header")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        raise AccessDeniedError("malformed Authorization header")
    return token


def verify_token(
    request: Request, tokens: TokenIssuer = Depends(get_token_issuer),
) -> CurrentUser:
    """Gate for task routes: decode the bearer token into a CurrentUser."""
    token = extract_bearer_token(request.headers.get("authorization"))
    claims = tokens.verify(token)
    return CurrentUser(email=Email(claims[EMAIL_FIELD]), claims=claims)


def get_user_service(
    db: AsyncSession = Depends(get_db),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> UserService:
    return UserService(SqlUserRepository(db), tokens)


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(SqlTaskRepository(db))
