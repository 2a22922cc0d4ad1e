"""Document Helpers: pure transforms over schema-less JSON documents.

Invariants:
    - Input dicts are never mutated; every helper returns a new dict
    - `_id` is owned by storage: stripped from bodies, never reassigned
    - A task body always carries the owner email and a status after build_task
    - Write summaries serialize to the camelCase shape document drivers report
"""

import copy
from dataclasses import dataclass
from typing import Any

from task_manager.core.domain_types import (
    EMAIL_FIELD, ID_FIELD, INITIAL_TASK_STATUS, OWNER_FIELD, STATUS_FIELD,
)
from task_manager.core.errors import DocumentWriteError


# ─── Body Transforms ─────────────────────────────────────────────

def strip_id(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop a client-supplied `_id`; identifiers are assigned by storage."""
    return {k: v for k, v in fields.items() if k != ID_FIELD}


def with_id(document_id: str, body: dict[str, Any]) -> dict[str, Any]:
    """Serialized document: `_id` first, then the stored body."""
    return {ID_FIELD: document_id, **strip_id(body)}


def email_key(document: dict[str, Any]) -> str | None:
    """Indexable email of a user document. Non-string emails are not indexed."""
    value = document.get(EMAIL_FIELD)
    return value if isinstance(value, str) else None


def build_task(fields: dict[str, Any], owner_email: str) -> dict[str, Any]:
    """Client fields plus the forced owner and initial status."""
    return {
        **strip_id(fields),
        OWNER_FIELD: owner_email,
        STATUS_FIELD: INITIAL_TASK_STATUS,
    }


def apply_set(
    document_id: str, body: dict[str, Any], fields: dict[str, Any],
) -> dict[str, Any]:
    """Merge `fields` into `body` with `$set` semantics.

    Top-level keys overwrite. Dotted keys ("profile.name") walk into nested
    objects, creating missing ones. Any write under `_id` other than
    setting it to its current value, or walking through a non-object value,
    raises DocumentWriteError.
    """
    merged = copy.deepcopy(body)
    for path, value in fields.items():
        if path.split(".")[0] == ID_FIELD:
            if path != ID_FIELD or value != document_id:
                raise DocumentWriteError(
                    "Performing an update on the path '_id' would modify "
                    "the immutable field '_id'",
                    path,
                )
            continue
        _set_path(merged, path, copy.deepcopy(value))
    return merged


def _set_path(target: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    if any(not part for part in parts):
        raise DocumentWriteError(f"Invalid field path '{path}'", path)
    node = target
    for depth, part in enumerate(parts[:-1]):
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            walked = ".".join(parts[: depth + 1])
            raise DocumentWriteError(
                f"Cannot create field '{parts[depth + 1]}' in element "
                f"'{walked}' which is not an object",
                path,
            )
        node = child
    node[parts[-1]] = value


# ─── Write Summaries ─────────────────────────────────────────────

@dataclass(frozen=True)
class UpdateResult:
    matched_count: int
    modified_count: int

    def to_response(self) -> dict:
        return {
            "acknowledged": True,
            "matchedCount": self.matched_count,
            "modifiedCount": self.modified_count,
            "upsertedId": None,
            "upsertedCount": 0,
        }


@dataclass(frozen=True)
class DeleteResult:
    deleted_count: int
