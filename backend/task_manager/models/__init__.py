"""ORM Models: one table per document collection.

Invariants:
    - All models inherit from Base (db/base.py)
    - The JSON `body` column holds the client document without `_id`
"""

from task_manager.models.user_document import UserDocument  # noqa: F401
from task_manager.models.task_document import TaskDocument  # noqa: F401
