"""Path normalization for containment checks."""

from __future__ import annotations

import os
from pathlib import Path


def clean_path(path: str | Path, cwd: Path | None = None) -> Path:
    """Return an absolute, normalized form of ``path``.

    Relative paths are resolved against ``cwd`` (the process working directory
    if None). ``.`` and ``..`` segments are collapsed lexically and case is
    folded on case-insensitive platforms; symlinks are left alone.
    """
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = (cwd or Path.cwd()) / p
    return Path(os.path.normcase(os.path.normpath(p)))


def relative_posix(target: Path, root: Path) -> str:
    """``target`` relative to ``root`` with forward slashes, as git pathspecs expect."""
    return Path(os.path.relpath(target, root)).as_posix()
