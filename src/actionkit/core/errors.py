"""Exception types raised by actionkit."""

from __future__ import annotations

from pathlib import Path


class ActionsError(Exception):
    """Base class for every error raised by actionkit."""


class ValidationError(ActionsError, ValueError):
    """Input rejected before any I/O was attempted."""


class ConfigurationError(ActionsError, LookupError):
    """A required indirection variable is absent or empty."""

    def __init__(self, variable: str, message: str | None = None):
        self.variable = variable
        super().__init__(message or f"${variable} is not set")


class TargetFileError(ActionsError, OSError):
    """A workflow file could not be opened or written."""

    def __init__(self, path: Path | str, variable: str, reason: OSError):
        self.path = Path(path)
        self.variable = variable
        self.reason = reason
        super().__init__(f"could not open ${variable} file {self.path}: {reason}")
