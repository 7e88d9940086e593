"""Command-line interface."""

from pkgdelta.cli.app import app, main

__all__ = ["app", "main"]
