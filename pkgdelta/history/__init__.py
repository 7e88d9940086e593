"""Per-package commit ranges and release tag lookup.

Usage:
    from pkgdelta.git import SubprocessGit
    from pkgdelta.history import find_tags, resolve_commits

    git = SubprocessGit()
    commits = resolve_commits(git, repo_root, "packages/a", last_release_sha)
    tags = find_tags(git, "main", ["pkg-a@"], cwd=repo_root)
"""

from pkgdelta.history.commits import build_range_query, normalize_commit, resolve_commits
from pkgdelta.history.model import Commit, HistoryError, RangeQuery, TagFilterSpec
from pkgdelta.history.tags import find_tags, parse_tag_list
from pkgdelta.history.validation import ValidationError

__all__ = [
    "Commit",
    "HistoryError",
    "RangeQuery",
    "TagFilterSpec",
    "ValidationError",
    "build_range_query",
    "find_tags",
    "normalize_commit",
    "parse_tag_list",
    "resolve_commits",
]
