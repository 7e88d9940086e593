"""Exit codes for the pkgdelta CLI."""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success
    - 1: User error (invalid path, malformed commit id)
    - 2: Git error (not a repository, bad branch, git missing)
    - 3: Config error (unreadable or invalid pkgdelta.toml)
    """

    OK = 0
    USER_ERROR = 1
    GIT_ERROR = 2
    CONFIG_ERROR = 3

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
