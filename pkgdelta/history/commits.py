"""Commits touching one package directory since its last release.

Given a working directory and a package directory below it, list the commits
on the current branch that changed something under that directory, newest
first. With ``last_release_ref`` the range starts just after that commit;
without it the whole history of HEAD is searched.

Usage:
    match resolve_commits(SubprocessGit(), repo, "packages/a", last_sha):
        case Ok(commits):
            for c in commits:
                print(c.short_hash, c.subject)
        case Err(e):
            print(f"{e.field}: {e.message}")
"""

from __future__ import annotations

from pathlib import Path

from pkgdelta.core.result import Err, Ok, Result
from pkgdelta.git.gateway import GitGateway
from pkgdelta.git.log_format import DEFAULT_LOG_FORMAT, LogFormat, RawCommit
from pkgdelta.history.model import Commit, HistoryError, RangeQuery
from pkgdelta.history.paths import clean_path, relative_posix
from pkgdelta.history.validation import (
    check_branch,
    check_commit_ref,
    check_directory,
    check_inside,
    check_path,
)
from pkgdelta.output.console import ConsoleProtocol

__all__ = ["build_range_query", "normalize_commit", "resolve_commits"]


def build_range_query(
    git: GitGateway,
    working_dir: str | Path,
    target_dir: str | Path,
    last_release_ref: str | None = None,
    first_parent_branch: str | None = None,
) -> Result[RangeQuery, HistoryError]:
    """Validate the arguments and resolve them into a RangeQuery.

    All argument checks run before git is invoked. The only git call is the
    repository root lookup, which may return an ancestor of ``working_dir``.
    """
    cwd_check = check_path(working_dir, "working_dir")
    if isinstance(cwd_check, Err):
        return Err(HistoryError.from_validation(cwd_check.error))
    dir_check = check_path(target_dir, "target_dir")
    if isinstance(dir_check, Err):
        return Err(HistoryError.from_validation(dir_check.error))

    cwd = clean_path(working_dir)
    target = clean_path(target_dir, cwd)

    for result in (
        check_directory(cwd, "working_dir"),
        check_directory(target, "target_dir"),
        check_commit_ref(last_release_ref, "last_release_ref"),
        check_branch(first_parent_branch, "first_parent_branch"),
        check_inside(target, cwd, "target_dir"),
    ):
        if isinstance(result, Err):
            return Err(HistoryError.from_validation(result.error))

    root_result = git.show_toplevel(cwd)
    if isinstance(root_result, Err):
        return Err(HistoryError.from_git(root_result.error))
    root = root_result.value

    # git reports the root with symlinks resolved
    relative = relative_posix(target.resolve(), root.resolve())
    try:
        query = RangeQuery(
            repo_root=root,
            relative_path=relative,
            since_ref=last_release_ref,
            first_parent_filter=first_parent_branch,
        )
    except ValueError as e:
        return Err(
            HistoryError(
                kind="invalid_input",
                message=f"target_dir: Must be inside the repository at {root}",
                hint=str(e),
                field="target_dir",
                constraint="outside_working_dir",
            )
        )
    return Ok(query)


def normalize_commit(raw: RawCommit) -> Commit:
    """Trim the message and tag decoration; nothing else changes."""
    return Commit(
        hash=raw.hash,
        message=raw.message.strip(),
        tags=raw.tags.strip(),
        committer_date=raw.committer_date,
    )


def resolve_commits(
    git: GitGateway,
    working_dir: str | Path,
    target_dir: str | Path,
    last_release_ref: str | None = None,
    first_parent_branch: str | None = None,
    *,
    log_format: LogFormat = DEFAULT_LOG_FORMAT,
    console: ConsoleProtocol | None = None,
) -> Result[list[Commit], HistoryError]:
    """List commits touching ``target_dir`` since ``last_release_ref``.

    Args:
        git: Gateway used for the root lookup and the log query
        working_dir: Directory inside the repository
        target_dir: Package directory, absolute or relative to ``working_dir``;
            must be strictly inside ``working_dir``
        last_release_ref: Full commit id of the previous release (exclusive)
        first_parent_branch: Only follow first parents, starting from this branch
        log_format: Field mapping for the log query
        console: Receives trace lines when given

    Returns:
        Ok(commits) newest first, or Err(HistoryError) naming the failed
        argument check or git step
    """
    query_result = build_range_query(
        git, working_dir, target_dir, last_release_ref, first_parent_branch
    )
    if isinstance(query_result, Err):
        return query_result
    query = query_result.value

    revisions = query.revision_args()
    log_result = git.log(query.repo_root, revisions, query.relative_path, log_format)
    if isinstance(log_result, Err):
        return Err(HistoryError.from_git(log_result.error))

    commits = [normalize_commit(raw) for raw in log_result.value]

    if console is not None:
        console.trace(f"git log filter query: {[*revisions, '--', query.relative_path]}")
        console.trace(f"filtered commits: {len(commits)}")
        for c in commits:
            console.trace(f"  {c.short_hash} {c.subject}")

    return Ok(commits)
