"""Tests for core/config.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from pkgdelta.core.config import (
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_GIT_TIMEOUT_SECONDS,
    Config,
    load_config,
)
from pkgdelta.core.result import Err, Ok


class TestConfigDefaults:
    def test_defaults(self) -> None:
        config = Config()
        assert config.git.executable == DEFAULT_GIT_EXECUTABLE
        assert config.git.timeout == DEFAULT_GIT_TIMEOUT_SECONDS
        assert config.tags.filters == ()

    def test_empty_mapping(self) -> None:
        assert Config.from_dict({}) == Config()


class TestConfigFromDict:
    def test_full(self) -> None:
        config = Config.from_dict(
            {
                "git": {"executable": "/opt/git/bin/git", "timeout": 5},
                "tags": {"filters": ["pkg-a@", "beta"]},
            }
        )
        assert config.git.executable == "/opt/git/bin/git"
        assert config.git.timeout == 5.0
        assert config.tags.filters == ("pkg-a@", "beta")

    def test_blank_executable_falls_back(self) -> None:
        config = Config.from_dict({"git": {"executable": "   "}})
        assert config.git.executable == DEFAULT_GIT_EXECUTABLE

    @pytest.mark.parametrize("timeout", [0, -1, "30", True])
    def test_invalid_timeout(self, timeout: object) -> None:
        with pytest.raises(ValueError, match="git.timeout"):
            Config.from_dict({"git": {"timeout": timeout}})

    @pytest.mark.parametrize("filters", ["v1", [1, 2], ["ok", None]])
    def test_invalid_filters(self, filters: object) -> None:
        with pytest.raises(ValueError, match="tags.filters"):
            Config.from_dict({"tags": {"filters": filters}})


class TestLoadConfig:
    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "pkgdelta.toml"
        path.write_text(
            '[git]\nexecutable = "git2"\ntimeout = 12.5\n\n[tags]\nfilters = ["v"]\n',
            encoding="utf-8",
        )

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.git.executable == "git2"
        assert result.value.git.timeout == 12.5
        assert result.value.tags.filters == ("v",)

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")

        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == tmp_path / "missing.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "pkgdelta.toml"
        path.write_text("[git\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "pkgdelta.toml"
        path.write_text('[tags]\nfilters = "v"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message
