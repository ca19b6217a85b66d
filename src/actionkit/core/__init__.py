"""Core protocol encoders and file writers."""

from actionkit.core.errors import (
    ActionsError,
    ConfigurationError,
    TargetFileError,
    ValidationError,
)

__all__ = [
    "ActionsError",
    "ConfigurationError",
    "TargetFileError",
    "ValidationError",
]
