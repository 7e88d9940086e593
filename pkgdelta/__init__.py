"""Per-package commit ranges and release tag lookup for monorepos."""

__version__ = "0.1.0"
