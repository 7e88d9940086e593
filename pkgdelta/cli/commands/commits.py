"""Commits command - list commits touching a package since its last release."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from pkgdelta.cli.context import build_context, exit_on_error
from pkgdelta.core.result import Err
from pkgdelta.history.commits import resolve_commits
from pkgdelta.history.model import Commit


def _commit_to_dict(c: Commit) -> dict[str, str]:
    return {
        "hash": c.hash,
        "message": c.message,
        "tags": c.tags,
        "committerDate": c.committer_date.isoformat(),
    }


def commits(
    target: Path = typer.Argument(..., help="Package directory (relative to --cwd or absolute)."),
    cwd: Path = typer.Option(Path("."), "--cwd", help="Working directory inside the repository."),
    since: str | None = typer.Option(
        None, "--since", help="Full commit id of the last release (exclusive)."
    ),
    first_parent: str | None = typer.Option(
        None, "--first-parent", help="Only follow first parents of this branch."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print commits as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace git queries on stderr."),
    config: Path | None = typer.Option(None, "--config", help="Path to pkgdelta.toml."),
) -> None:
    """List commits touching TARGET since the last release, newest first."""
    ctx = build_context(cwd=cwd, config_path=config, verbose=verbose)

    result = resolve_commits(
        ctx.git,
        ctx.cwd,
        target,
        since,
        first_parent,
        console=ctx.console if ctx.verbose else None,
    )
    if isinstance(result, Err):
        exit_on_error(ctx, result.error)
        return

    if as_json:
        typer.echo(json.dumps([_commit_to_dict(c) for c in result.value], indent=2))
        return

    for c in result.value:
        date = c.committer_date.date().isoformat()
        tags = f" {c.tags}" if c.tags else ""
        typer.echo(f"{c.short_hash} {date} {c.subject}{tags}")
