"""Response Schemas: fixed-shape bodies at the API boundary.

Documents themselves are schema-less and returned as plain dicts; only the
envelopes around them are modelled here.
"""

from pydantic import BaseModel


class RegistrationResponse(BaseModel):
    """`{token}` for a new user, `{message, token}` for an existing one."""
    token: str
    message: str | None = None


class MessageResponse(BaseModel):
    message: str


class UpdateSummaryResponse(BaseModel):
    """Write summary in the camelCase shape document drivers report."""
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedId: str | None = None
    upsertedCount: int = 0
