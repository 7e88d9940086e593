"""Value types shared by the commit and tag lookups."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Literal

from pkgdelta.git.gateway import GitError
from pkgdelta.history.validation import ValidationError

__all__ = [
    "Commit",
    "HistoryError",
    "RangeQuery",
    "TagFilterSpec",
]


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit touching a package directory.

    Attributes:
        hash: Full commit id
        message: Commit message, trimmed
        tags: Raw ref decoration git printed for the commit, trimmed
            (e.g. ``(tag: pkg-a@1.0.0)``), empty when undecorated
        committer_date: Committer timestamp, timezone aware
    """

    hash: str
    message: str
    tags: str
    committer_date: datetime

    @property
    def subject(self) -> str:
        """First line of the message."""
        return self.message.split("\n", 1)[0]

    @property
    def short_hash(self) -> str:
        return self.hash[:7]


@dataclass(frozen=True, slots=True)
class RangeQuery:
    """Resolved parameters of a directory-scoped history query.

    Attributes:
        repo_root: Top-level directory of the repository
        relative_path: Package directory relative to ``repo_root`` (POSIX form)
        since_ref: Exclusive lower bound, None for the whole history
        until_ref: Inclusive upper bound
        first_parent_filter: Branch whose first-parent chain bounds traversal
    """

    repo_root: Path
    relative_path: str
    since_ref: str | None = None
    until_ref: str = "HEAD"
    first_parent_filter: str | None = None

    def __post_init__(self) -> None:
        rel = self.relative_path
        if not rel or rel == "." or rel == ".." or rel.startswith("../") or rel.startswith("/"):
            raise ValueError(f"relative_path must lie strictly inside repo_root: {rel!r}")

    @property
    def range_expression(self) -> str:
        if self.since_ref:
            return f"{self.since_ref}..{self.until_ref}"
        return self.until_ref

    def revision_args(self) -> list[str]:
        """Revision arguments for ``git log``, without the path filter."""
        args: list[str] = []
        if self.first_parent_filter:
            args.extend(["--first-parent", self.first_parent_filter])
        args.append(self.range_expression)
        return args


@dataclass(frozen=True, slots=True)
class TagFilterSpec:
    """Substrings that must all occur in a tag name.

    Matching is plain, case-sensitive containment: no anchoring, no ordering
    between substrings. An empty filter matches every tag.
    """

    substrings: tuple[str, ...] = ()

    @classmethod
    def of(cls, filters: list[str] | tuple[str, ...] | None) -> TagFilterSpec:
        return cls(tuple(filters or ()))

    @property
    def is_empty(self) -> bool:
        return not self.substrings

    def matches(self, name: str) -> bool:
        return all(s in name for s in self.substrings)


@dataclass(frozen=True, slots=True)
class HistoryError:
    """Error returned by ``resolve_commits`` and ``find_tags``.

    ``invalid_input`` errors carry the offending ``field`` and the failed
    ``constraint``; ``git_failed`` errors carry git's message as ``hint``.
    """

    kind: Literal["invalid_input", "git_failed"]
    message: str
    hint: str | None = None
    field: str | None = None
    constraint: str | None = None

    @classmethod
    def from_validation(cls, error: ValidationError) -> HistoryError:
        return cls(
            kind="invalid_input",
            message=str(error),
            hint=error.value,
            field=error.field,
            constraint=error.kind,
        )

    @classmethod
    def from_git(cls, error: GitError) -> HistoryError:
        return cls(
            kind="git_failed",
            message=f"git {error.command} failed (exit {error.returncode})",
            hint=error.message or None,
        )
