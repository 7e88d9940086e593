"""Typed configuration loading.

pkgdelta reads an optional ``pkgdelta.toml``:

    [git]
    executable = "git"
    timeout = 30.0

    [tags]
    filters = ["v"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_GIT_EXECUTABLE",
    "DEFAULT_GIT_TIMEOUT_SECONDS",
    "Config",
    "ConfigError",
    "GitConfig",
    "TagsConfig",
    "load_config",
]

CONFIG_FILENAME = "pkgdelta.toml"
DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_GIT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitConfig:
    """How git is invoked."""

    executable: str = DEFAULT_GIT_EXECUTABLE
    timeout: float = DEFAULT_GIT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class TagsConfig:
    """Default substring filters applied by ``pkgdelta tags``."""

    filters: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    git: GitConfig = field(default_factory=GitConfig)
    tags: TagsConfig = field(default_factory=TagsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a present key holds a value of the wrong type.
        """
        git: StrDict = get_table(data, "git") or {}
        tags: StrDict = get_table(data, "tags") or {}

        timeout = get_float(git, "timeout")
        if "timeout" in git and (timeout is None or timeout <= 0):
            raise ValueError("git.timeout must be a positive number")
        filters = get_str_list(tags, "filters")
        if "filters" in tags and filters is None:
            raise ValueError("tags.filters must be a list of strings")

        return cls(
            git=GitConfig(
                executable=get_str(git, "executable") or DEFAULT_GIT_EXECUTABLE,
                timeout=timeout or DEFAULT_GIT_TIMEOUT_SECONDS,
            ),
            tags=TagsConfig(filters=tuple(filters or ())),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data = as_str_dict(tomllib.loads(content.decode("utf-8")))
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to pkgdelta.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))

