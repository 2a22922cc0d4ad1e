"""Domain Types: identifiers and fixed values shared across layers.

Invariants:
    - DocumentId is the server-generated identifier exposed as `_id`
    - Email is the natural key of a user and the owner key of a task
    - Fixed response messages are part of the public contract
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DocumentId = NewType("DocumentId", str)
Email = NewType("Email", str)


# ─── Field Names ─────────────────────────────────────────────────

ID_FIELD = "_id"
EMAIL_FIELD = "email"
OWNER_FIELD = "user"
STATUS_FIELD = "status"

INITIAL_TASK_STATUS = "To-Do"


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """Document collections, also used as table names."""
    USERS = "users"
    TASKS = "tasks"


class Message(str, Enum):
    """Fixed messages returned to clients."""
    USER_EXISTS = "User already exists"
    ACCESS_DENIED = "Access Denied!"
    TASK_NOT_FOUND = "Task not found or user unauthorized"
    TASK_STATUS_UPDATED = "Task status updated"
    TASK_DELETED = "Task deleted"
