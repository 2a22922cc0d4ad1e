"""Bearer Tokens: issue/verify with expiry, tampering and claim checks."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from task_manager.core.errors import AccessDeniedError
from task_manager.infrastructure.tokens import TokenIssuer

SECRET = "unit-test-secret-0123456789abcdef0123456789"


@pytest.fixture
def issuer():
    return TokenIssuer(SECRET)


def test_issued_token_carries_email(issuer):
    claims = issuer.verify(issuer.issue("a@x.com"))
    assert claims["email"] == "a@x.com"


def test_token_expires_after_seven_days(issuer):
    now = datetime(2026, 1, 1, tzinfo=timezone.utc)
    token = issuer.issue("a@x.com", now=now)
    claims = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_rejected(issuer):
    token = issuer.issue("a@x.com", now=datetime.now(timezone.utc) - timedelta(days=8))
    with pytest.raises(AccessDeniedError) as exc_info:
        issuer.verify(token)
    assert exc_info.value.reason == "token expired"


def test_wrong_secret_is_rejected(issuer):
    token = TokenIssuer("other-secret-0123456789abcdef0123456789").issue("a@x.com")
    with pytest.raises(AccessDeniedError):
        issuer.verify(token)


def test_garbage_is_rejected(issuer):
    with pytest.raises(AccessDeniedError):
        issuer.verify("not-a-jwt")


def test_token_without_email_is_rejected(issuer):
    token = issuer.issue(None)
    with pytest.raises(AccessDeniedError):
        issuer.verify(token)


def test_token_without_expiry_is_rejected(issuer):
    token = jwt.encode({"email": "a@x.com"}, SECRET, algorithm="HS256")
    with pytest.raises(AccessDeniedError):
        issuer.verify(token)
