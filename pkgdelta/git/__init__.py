"""Git collaborators: the log format and the query gateway.

Usage:
    from pkgdelta.git import SubprocessGit, DEFAULT_LOG_FORMAT

    git = SubprocessGit(timeout=10.0)
    commits = git.log(root, ["HEAD"], "packages/a", DEFAULT_LOG_FORMAT)
"""

from pkgdelta.git.gateway import GitError, GitGateway, SubprocessGit
from pkgdelta.git.log_format import (
    DEFAULT_LOG_FORMAT,
    LogFormat,
    LogParseError,
    RawCommit,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "GitError",
    "GitGateway",
    "LogFormat",
    "LogParseError",
    "RawCommit",
    "SubprocessGit",
]
