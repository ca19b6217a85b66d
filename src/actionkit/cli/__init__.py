"""actionkit command-line interface."""

from actionkit.cli.main import app, main

__all__ = ["app", "main"]
