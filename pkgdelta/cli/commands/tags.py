"""Tags command - list release tags merged into a branch."""

from __future__ import annotations

from pathlib import Path

import typer

from pkgdelta.cli.context import build_context, exit_on_error
from pkgdelta.core.result import Err
from pkgdelta.history.tags import find_tags


def tags(
    branch: str = typer.Argument(..., help="Branch whose merged tags are listed."),
    filters: list[str] | None = typer.Option(
        None,
        "--filter",
        "-f",
        help="Substring every tag must contain (repeatable). Defaults to [tags] filters.",
    ),
    cwd: Path = typer.Option(Path("."), "--cwd", help="Working directory inside the repository."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace git queries on stderr."),
    config: Path | None = typer.Option(None, "--config", help="Path to pkgdelta.toml."),
) -> None:
    """List tags reachable from BRANCH that contain every filter substring."""
    ctx = build_context(cwd=cwd, config_path=config, verbose=verbose)

    effective = list(filters) if filters else list(ctx.config.tags.filters)
    result = find_tags(
        ctx.git,
        branch,
        effective,
        cwd=ctx.cwd,
        console=ctx.console if ctx.verbose else None,
    )
    if isinstance(result, Err):
        exit_on_error(ctx, result.error)
        return

    for tag in result.value:
        typer.echo(tag)
