"""Field mapping and parser for ``git log`` output.

A ``LogFormat`` is an immutable value naming the pretty-format placeholder
for each record field. It is handed to every log query explicitly, so two
queries running at the same time can never see each other's mapping.

Records are rendered with a unit separator (0x1f) between fields and a
record separator (0x1e) after each record. Neither byte appears in normal
commit messages or ref names.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pkgdelta.core.result import Err, Ok, Result

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "FIELD_SEPARATOR",
    "RECORD_SEPARATOR",
    "LogFormat",
    "LogParseError",
    "RawCommit",
]

FIELD_SEPARATOR = "\x1f"
RECORD_SEPARATOR = "\x1e"


@dataclass(frozen=True, slots=True)
class RawCommit:
    """One record as git printed it. Text fields are not trimmed."""

    hash: str
    message: str
    tags: str
    committer_date: datetime


@dataclass(frozen=True, slots=True)
class LogParseError:
    message: str
    record_index: int


@dataclass(frozen=True, slots=True)
class LogFormat:
    """Pretty-format placeholders for each RawCommit field.

    ``committer_date`` must produce a strict ISO 8601 timestamp (``%cI``).
    """

    hash: str = "%H"
    message: str = "%B"
    tags: str = "%d"
    committer_date: str = "%cI"

    def pretty_arg(self) -> str:
        """Render the ``--format=`` argument for ``git log``."""
        fields = (self.hash, self.message, self.tags, self.committer_date)
        return "--format=" + "%x1f".join(fields) + "%x1e"

    def parse(self, output: str) -> Result[list[RawCommit], LogParseError]:
        """Split ``git log`` stdout into records, keeping git's order."""
        records: list[RawCommit] = []
        for index, chunk in enumerate(output.split(RECORD_SEPARATOR)):
            # git terminates each formatted record with a newline
            chunk = chunk.lstrip("\r\n")
            if not chunk.strip():
                continue

            parts = chunk.split(FIELD_SEPARATOR)
            if len(parts) != 4:
                return Err(
                    LogParseError(
                        f"expected 4 fields, got {len(parts)}",
                        record_index=index,
                    )
                )

            commit_hash, message, tags, date_text = parts
            try:
                committer_date = datetime.fromisoformat(date_text.strip())
            except ValueError:
                return Err(
                    LogParseError(
                        f"invalid committer date: {date_text.strip()!r}",
                        record_index=index,
                    )
                )

            records.append(
                RawCommit(
                    hash=commit_hash.strip(),
                    message=message,
                    tags=tags,
                    committer_date=committer_date,
                )
            )
        return Ok(records)


DEFAULT_LOG_FORMAT = LogFormat()
