from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from pkgdelta.core.config import CONFIG_FILENAME, Config, load_config
from pkgdelta.core.errors import ErrorCode
from pkgdelta.core.result import Err
from pkgdelta.git.gateway import GitGateway, SubprocessGit
from pkgdelta.history.model import HistoryError
from pkgdelta.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    cwd: Path
    config: Config
    git: GitGateway
    console: ConsoleProtocol
    verbose: bool = False


def build_context(
    *,
    cwd: Path,
    config_path: Path | None,
    verbose: bool = False,
) -> CLIContext:
    console = RichConsole()

    path = config_path if config_path is not None else cwd / CONFIG_FILENAME
    config = Config()
    if config_path is not None or path.exists():
        result = load_config(path)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        config = result.value

    return CLIContext(
        cwd=cwd,
        config=config,
        git=SubprocessGit(config.git.executable, timeout=config.git.timeout),
        console=console,
        verbose=verbose,
    )


def exit_on_error(ctx: CLIContext, error: HistoryError) -> None:
    """Report ``error`` and exit with the matching code."""
    ctx.console.error(error.message)
    if error.hint:
        ctx.console.print(error.hint, Style.TRACE)
    code = ErrorCode.USER_ERROR if error.kind == "invalid_input" else ErrorCode.GIT_ERROR
    raise typer.Exit(code=int(code))
