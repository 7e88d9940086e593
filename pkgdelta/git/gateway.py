"""Read-only git queries behind a narrow interface.

``GitGateway`` is what the history and tag lookups depend on. The production
implementation, ``SubprocessGit``, shells out through
``pkgdelta.platform.process.run``; tests substitute a fake.

Usage:
    git = SubprocessGit()
    match git.show_toplevel(Path.cwd()):
        case Ok(root):
            print(root)
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from pkgdelta.core.config import DEFAULT_GIT_EXECUTABLE, DEFAULT_GIT_TIMEOUT_SECONDS
from pkgdelta.core.result import Err, Ok, Result
from pkgdelta.git.log_format import LogFormat, RawCommit
from pkgdelta.platform.process import ProcessError
from pkgdelta.platform.process import run as run_process

__all__ = [
    "GitError",
    "GitGateway",
    "SubprocessGit",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message (git's stderr when available)
        returncode: Process return code, -1 if git did not run
    """

    command: str
    message: str
    returncode: int = 1


class GitGateway(Protocol):
    """The three git queries pkgdelta needs."""

    def show_toplevel(self, cwd: Path) -> Result[Path, GitError]:
        """Absolute top-level directory of the repository enclosing ``cwd``."""
        ...

    def log(
        self,
        cwd: Path,
        revisions: Sequence[str],
        path: str,
        log_format: LogFormat,
    ) -> Result[list[RawCommit], GitError]:
        """Commits selected by ``revisions`` that touch ``path``, in git's order."""
        ...

    def tags_merged(self, cwd: Path, branch: str) -> Result[str, GitError]:
        """Raw newline-delimited names of tags reachable from ``branch``."""
        ...


class SubprocessGit:
    """GitGateway implementation running the git binary."""

    def __init__(
        self,
        executable: str = DEFAULT_GIT_EXECUTABLE,
        *,
        timeout: float = DEFAULT_GIT_TIMEOUT_SECONDS,
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    def show_toplevel(self, cwd: Path) -> Result[Path, GitError]:
        result = self._run(cwd, ["rev-parse", "--show-toplevel"])
        match result:
            case Err(e):
                return Err(_git_error("rev-parse --show-toplevel", e))
            case Ok(stdout):
                root = stdout.strip()
                if not root:
                    return Err(
                        GitError(
                            command="rev-parse --show-toplevel",
                            message=f"no repository root reported for {cwd}",
                        )
                    )
                return Ok(Path(root))

    def log(
        self,
        cwd: Path,
        revisions: Sequence[str],
        path: str,
        log_format: LogFormat,
    ) -> Result[list[RawCommit], GitError]:
        result = self._run(cwd, ["log", log_format.pretty_arg(), *revisions, "--", path])
        if isinstance(result, Err):
            return Err(_git_error("log", result.error))

        parsed = log_format.parse(result.value)
        if isinstance(parsed, Err):
            e = parsed.error
            return Err(
                GitError(
                    command="log",
                    message=f"unparsable log record #{e.record_index}: {e.message}",
                    returncode=0,
                )
            )
        return Ok(parsed.value)

    def tags_merged(self, cwd: Path, branch: str) -> Result[str, GitError]:
        result = self._run(cwd, ["tag", "--merged", branch])
        match result:
            case Err(e):
                return Err(_git_error(f"tag --merged {branch}", e))
            case Ok(stdout):
                return Ok(stdout)

    def _run(self, cwd: Path, args: list[str]) -> Result[str, ProcessError]:
        return run_process([self.executable, *args], cwd=cwd, timeout=self.timeout)


def _git_error(command: str, e: ProcessError) -> GitError:
    return GitError(
        command=command,
        message=e.stderr.strip() or e.stdout.strip() or f"git {command} failed",
        returncode=e.returncode,
    )
