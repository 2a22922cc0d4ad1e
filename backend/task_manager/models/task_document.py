"""Task Document ORM: schema-less task record scoped to its owner.

Invariants:
    - owner_email mirrors body["user"] and is set once at insert
    - Every query against this table filters on owner_email
    - No foreign key to users: ownership is a plain email match
"""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from task_manager.core.documents import with_id
from task_manager.core.domain_types import Collection
from task_manager.db.base import Base
from task_manager.models.user_document import new_document_id


class TaskDocument(Base):
    __tablename__ = Collection.TASKS.value

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=new_document_id,
    )
    owner_email: Mapped[str] = mapped_column(
        Text, nullable=False, index=True,
    )
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        return with_id(self.id, self.body)
