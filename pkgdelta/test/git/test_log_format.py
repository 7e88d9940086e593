"""Tests for git/log_format.py."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pkgdelta.core.result import Err, Ok
from pkgdelta.git.log_format import DEFAULT_LOG_FORMAT, LogFormat

H1 = "1" * 40
H2 = "2" * 40


def _record(h: str, message: str, tags: str, date: str) -> str:
    return f"{h}\x1f{message}\x1f{tags}\x1f{date}\x1e\n"


class TestPrettyArg:
    def test_default(self) -> None:
        assert DEFAULT_LOG_FORMAT.pretty_arg() == "--format=%H%x1f%B%x1f%d%x1f%cI%x1e"

    def test_custom_fields(self) -> None:
        fmt = LogFormat(tags="%D", committer_date="%aI")
        assert fmt.pretty_arg() == "--format=%H%x1f%B%x1f%D%x1f%aI%x1e"

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_LOG_FORMAT.hash = "%h"  # type: ignore[misc]


class TestParse:
    def test_parses_records_in_order(self) -> None:
        output = _record(
            H2, "feat: second\n\nbody\n", " (HEAD -> main)", "2024-03-02T10:00:00+01:00"
        ) + _record(H1, "feat: first\n", "", "2024-03-01T09:00:00Z")

        result = DEFAULT_LOG_FORMAT.parse(output)

        assert isinstance(result, Ok)
        second, first = result.value
        assert second.hash == H2
        assert second.message == "feat: second\n\nbody\n"
        assert second.tags == " (HEAD -> main)"
        assert second.committer_date == datetime(
            2024, 3, 2, 10, 0, tzinfo=timezone(timedelta(hours=1))
        )
        assert first.hash == H1
        assert first.committer_date.tzinfo is not None

    def test_empty_output(self) -> None:
        assert DEFAULT_LOG_FORMAT.parse("") == Ok([])
        assert DEFAULT_LOG_FORMAT.parse("\n") == Ok([])

    def test_message_may_span_lines(self) -> None:
        output = _record(H1, "subject\n\n- one\n- two", "", "2024-01-01T00:00:00+00:00")

        result = DEFAULT_LOG_FORMAT.parse(output)

        assert isinstance(result, Ok)
        assert result.value[0].message == "subject\n\n- one\n- two"

    def test_wrong_field_count(self) -> None:
        result = DEFAULT_LOG_FORMAT.parse(f"{H1}\x1fonly two\x1e\n")

        assert isinstance(result, Err)
        assert result.error.record_index == 0
        assert "expected 4 fields" in result.error.message

    def test_invalid_date(self) -> None:
        output = _record(H1, "m", "", "2024-01-01T00:00:00+00:00") + _record(
            H2, "m", "", "yesterday"
        )

        result = DEFAULT_LOG_FORMAT.parse(output)

        assert isinstance(result, Err)
        assert result.error.record_index == 1
        assert "yesterday" in result.error.message
