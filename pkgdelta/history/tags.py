"""Release tags reachable from a branch, filtered by substrings."""

from __future__ import annotations

from pathlib import Path

from pkgdelta.core.result import Err, Ok, Result
from pkgdelta.git.gateway import GitGateway
from pkgdelta.history.model import HistoryError, TagFilterSpec
from pkgdelta.history.validation import check_branch
from pkgdelta.output.console import ConsoleProtocol

__all__ = ["find_tags", "parse_tag_list"]


def parse_tag_list(output: str) -> list[str]:
    """One tag per line; blank lines dropped, order kept."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def find_tags(
    git: GitGateway,
    branch: str,
    filters: list[str] | tuple[str, ...] | None = None,
    *,
    cwd: Path | None = None,
    console: ConsoleProtocol | None = None,
) -> Result[list[str], HistoryError]:
    """Tags merged into ``branch`` whose names contain every filter substring.

    No filters (None or empty) returns every merged tag. The order is the
    order git lists them in.
    """
    branch_check = check_branch(branch, "branch")
    if isinstance(branch_check, Err):
        return Err(HistoryError.from_validation(branch_check.error))

    result = git.tags_merged(cwd or Path.cwd(), branch)
    if isinstance(result, Err):
        return Err(HistoryError.from_git(result.error))

    tags = parse_tag_list(result.value)
    spec = TagFilterSpec.of(filters)
    matched = tags if spec.is_empty else [t for t in tags if spec.matches(t)]

    if console is not None:
        console.trace(f"tags merged into {branch}: {len(tags)}")
        if not spec.is_empty:
            console.trace(f"tags matching {list(spec.substrings)}: {len(matched)}")

    return Ok(matched)
