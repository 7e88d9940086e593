from __future__ import annotations

import typer

from pkgdelta import __version__
from pkgdelta.cli.commands.commits import commits
from pkgdelta.cli.commands.tags import tags


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    invoke_without_command=True,
    rich_markup_mode="rich",
)

app.command()(commits)
app.command()(tags)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    """Inspect per-package history in a multi-package repository."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
