"""Source-location annotations for notice, warning and error commands.

An annotation is assembled from independent options::

    render_command("notice", "Unused import", title("Lint"), file("app.py"), lines(3, 3))

Options may be given in any order. Each one only sets its own fields; the
rules coupling fields together (lines need a file, columns need a single
line) are applied once by :meth:`Annotation.finalize` against the complete
state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from actionkit.core.protocol.escape import escape_property

AnnotationOption = Callable[["Annotation"], None]


@dataclass
class Annotation:
    """Optional metadata attached to a workflow command."""

    title: Optional[str] = None
    file: Optional[str] = None
    start_line: Optional[int] = None
    end_line: Optional[int] = None
    start_column: Optional[int] = None
    end_column: Optional[int] = None

    def apply(self, *options: AnnotationOption) -> Annotation:
        for option in options:
            option(self)
        return self

    def finalize(self) -> Annotation:
        """Return a copy with every field that fails a coupling rule removed."""
        ann = replace(self)
        if ann.title == "":
            ann.title = None
        if ann.file == "":
            ann.file = None

        if ann.file is None or ann.start_line is None or ann.end_line is None:
            ann.start_line = None
            ann.end_line = None

        if (
            ann.start_line is None
            or ann.start_line != ann.end_line
            or ann.start_column is None
            or ann.end_column is None
        ):
            ann.start_column = None
            ann.end_column = None

        return ann

    def fields(self) -> list[tuple[str, str]]:
        """Wire ``(key, value)`` pairs in command order, omitting unset fields.

        Values are property-escaped. The annotation should be finalized first.
        """
        ordered = (
            ("title", self.title),
            ("file", self.file),
            ("line", self.start_line),
            ("endLine", self.end_line),
            ("col", self.start_column),
            ("endColumn", self.end_column),
        )
        return [(key, escape_property(str(value))) for key, value in ordered if value is not None]

    def render(self) -> str:
        """Serialize as ``key=value`` pairs joined by commas."""
        return ",".join(f"{key}={value}" for key, value in self.fields())


def build_annotation(*options: AnnotationOption) -> Annotation:
    """Apply options to a fresh annotation and finalize it."""
    return Annotation().apply(*options).finalize()


def _clamp_range(start: int, end: int) -> tuple[int, int]:
    start = start if start >= 1 else 1
    end = end if end >= 1 else 1
    if end < start:
        end = start
    return start, end


def title(text: str) -> AnnotationOption:
    """Set the annotation title."""

    def _apply(ann: Annotation) -> None:
        ann.title = text

    return _apply


def file(path: str) -> AnnotationOption:
    """Associate a source file with the annotation."""

    def _apply(ann: Annotation) -> None:
        ann.file = path

    return _apply


def lines(start: int, end: int) -> AnnotationOption:
    """Associate a range of lines with the annotation.

    A start or end below 1 becomes 1, and an end before the start becomes the
    start. Lines are dropped from the output unless a file is also set.
    """
    start, end = _clamp_range(start, end)

    def _apply(ann: Annotation) -> None:
        ann.start_line = start
        ann.end_line = end

    return _apply


def span(start: int, end: int) -> AnnotationOption:
    """Associate a range of columns on a single line with the annotation.

    A start below 1 becomes 1 and an end before the start becomes the start.
    An end below 1 drops the column range altogether, as does a line range
    covering more than one line (GitHub only accepts columns on a single line).
    """
    valid_end = end >= 1
    start, end = _clamp_range(start, end)

    def _apply(ann: Annotation) -> None:
        if valid_end:
            ann.start_column = start
            ann.end_column = end
        else:
            ann.start_column = None
            ann.end_column = None

    return _apply
