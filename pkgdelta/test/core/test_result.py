"""Tests for core/result.py."""

from __future__ import annotations

import pytest

from pkgdelta.core.result import Err, Ok, Result, is_err, is_ok


def _checked(value: int) -> Result[int, str]:
    if value < 0:
        return Err("negative")
    return Ok(value)


class TestOk:
    def test_accessors(self) -> None:
        r = Ok(3)
        assert r.is_ok() and not r.is_err()
        assert r.unwrap() == 3
        assert r.unwrap_or(0) == 3

    def test_map(self) -> None:
        assert Ok(2).map(lambda v: v * 10) == Ok(20)
        assert Ok(2).map_err(str.upper) == Ok(2)


class TestErr:
    def test_accessors(self) -> None:
        r = Err("boom")
        assert r.is_err() and not r.is_ok()
        assert r.unwrap_or(7) == 7
        with pytest.raises(ValueError, match="boom"):
            r.unwrap()

    def test_map_err(self) -> None:
        assert Err("boom").map_err(str.upper) == Err("BOOM")
        assert Err("boom").map(lambda v: v) == Err("boom")


def test_type_guards() -> None:
    assert is_ok(_checked(1))
    assert is_err(_checked(-1))


def test_pattern_matching() -> None:
    match _checked(-5):
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "negative"
