"""User Document ORM: schema-less user record with an indexed email mirror.

Invariants:
    - id is a 32-char hex string exposed to clients as `_id`
    - email mirrors body["email"] when it is a string, else NULL
    - email is indexed but NOT unique (duplicate check is read-before-write)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_manager.core.documents import with_id
from task_manager.core.domain_types import Collection
from task_manager.db.base import Base


def new_document_id() -> str:
    return uuid.uuid4().hex


class UserDocument(Base):
    __tablename__ = Collection.USERS.value

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=new_document_id,
    )
    email: Mapped[str | None] = mapped_column(
        Text, nullable=True, index=True,
    )
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        return with_id(self.id, self.body)
