"""actionkit - write GitHub Actions workflow commands and environment files."""

from actionkit.config.schema import ActionsConfig
from actionkit.core.errors import (
    ActionsError,
    ConfigurationError,
    TargetFileError,
    ValidationError,
)
from actionkit.core.inputs import Inputs
from actionkit.core.protocol import (
    Annotation,
    Logger,
    WorkflowFiles,
    file,
    lines,
    render_command,
    span,
    title,
)

__version__ = "0.1.0"

__all__ = [
    "ActionsConfig",
    "ActionsError",
    "Annotation",
    "ConfigurationError",
    "Inputs",
    "Logger",
    "TargetFileError",
    "ValidationError",
    "WorkflowFiles",
    "file",
    "lines",
    "render_command",
    "span",
    "title",
]
