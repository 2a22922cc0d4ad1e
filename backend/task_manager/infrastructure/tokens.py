"""Bearer Tokens: issue and verify HS256 JWTs keyed by email.

Invariants:
    - Payload is {email, iat, exp}; nothing else is trusted on verify
    - Every PyJWT failure maps to AccessDeniedError (valid or rejected, nothing in between)
    - A token without a string `email` claim is rejected
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from task_manager.config import Settings, get_settings
from task_manager.core.domain_types import EMAIL_FIELD
from task_manager.core.errors import AccessDeniedError

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Signs and verifies bearer tokens with a process-wide secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(self, email: Any, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            EMAIL_FIELD: email,
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict:
        """Decode and validate a token, returning its claims."""
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AccessDeniedError("token expired")
        except jwt.PyJWTError as e:
            raise AccessDeniedError(f"invalid token: {e}")

        if not isinstance(claims.get(EMAIL_FIELD), str):
            raise AccessDeniedError("token has no email claim")
        return claims


def build_token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(
        settings.access_token,
        algorithm=settings.token_algorithm,
        expires_in=timedelta(days=settings.token_expire_days),
    )


def get_token_issuer() -> TokenIssuer:
    """FastAPI dependency for the configured token issuer."""
    return build_token_issuer(get_settings())
