"""Input predicates for the history and tag lookups.

Each predicate returns ``Ok`` with the checked value or ``Err`` with a
``ValidationError`` naming the field and the constraint that failed, so
callers can branch on ``kind`` instead of parsing messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pkgdelta.core.result import Err, Ok, Result

__all__ = [
    "ValidationError",
    "ValidationKind",
    "check_branch",
    "check_commit_ref",
    "check_directory",
    "check_inside",
    "check_path",
]

ValidationKind = Literal[
    "empty_path",
    "not_a_directory",
    "malformed_ref",
    "malformed_branch",
    "outside_working_dir",
    "equals_working_dir",
]

_FULL_COMMIT_RE = re.compile(r"[0-9a-fA-F]{40}")


@dataclass(frozen=True, slots=True)
class ValidationError:
    field: str
    kind: ValidationKind
    message: str
    value: str | None = None

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


def check_path(value: str | Path | None, field: str) -> Result[str | Path, ValidationError]:
    """A path argument must be present and non-blank."""
    if value is None or not str(value).strip():
        return Err(ValidationError(field, "empty_path", "Must be a non-empty path"))
    return Ok(value)


def check_directory(path: Path, field: str) -> Result[Path, ValidationError]:
    if not path.is_dir():
        return Err(
            ValidationError(field, "not_a_directory", "Must be an existing directory", str(path))
        )
    return Ok(path)


def check_commit_ref(value: str | None, field: str) -> Result[str | None, ValidationError]:
    """An optional ref must be a full 40-character hexadecimal commit id.

    Existence is not checked here; git reports unknown commits.
    """
    if value is None:
        return Ok(None)
    if not _FULL_COMMIT_RE.fullmatch(value):
        return Err(
            ValidationError(
                field,
                "malformed_ref",
                "Must be a full 40-character hexadecimal commit id",
                value,
            )
        )
    return Ok(value)


def check_branch(value: str | None, field: str) -> Result[str | None, ValidationError]:
    """An optional branch name must be non-blank and must not look like an option."""
    if value is None:
        return Ok(None)
    if not value.strip() or value.startswith("-") or any(c.isspace() for c in value):
        return Err(ValidationError(field, "malformed_branch", "Must be a branch name", value))
    return Ok(value)


def check_inside(target: Path, root: Path, field: str) -> Result[Path, ValidationError]:
    """``target`` must sit strictly below ``root``.

    Both paths are expected to be normalized already. The comparison is by
    path component, so ``/repo/pkg-a`` is not inside ``/repo/pkg``.
    """
    if target == root:
        return Err(
            ValidationError(field, "equals_working_dir", "Must not be equal to working_dir", str(target))
        )
    if not target.is_relative_to(root):
        return Err(ValidationError(field, "outside_working_dir", "Must be inside working_dir", str(target)))
    return Ok(target)
