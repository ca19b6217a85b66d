"""Workflow command and environment file protocols."""

from actionkit.core.protocol.annotations import (
    Annotation,
    AnnotationOption,
    build_annotation,
    file,
    lines,
    span,
    title,
)
from actionkit.core.protocol.commands import Logger, render_command
from actionkit.core.protocol.delimiter import DelimiterSource, RandomDelimiterSource
from actionkit.core.protocol.escape import (
    escape_data,
    escape_property,
    unescape_data,
    unescape_property,
)
from actionkit.core.protocol.files import FileTarget, WorkflowFiles

__all__ = [
    "Annotation",
    "AnnotationOption",
    "DelimiterSource",
    "FileTarget",
    "Logger",
    "RandomDelimiterSource",
    "WorkflowFiles",
    "build_annotation",
    "escape_data",
    "escape_property",
    "file",
    "lines",
    "render_command",
    "span",
    "title",
    "unescape_data",
    "unescape_property",
]
