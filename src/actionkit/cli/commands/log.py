"""Workflow command CLI commands."""

from __future__ import annotations

from typing import Optional

import typer

from actionkit.cli.commands._shared import config_from_context
from actionkit.core.protocol.annotations import AnnotationOption, file, lines, span, title
from actionkit.core.protocol.commands import Logger

log_app = typer.Typer(
    name="log",
    help="Write workflow commands (notice, warning, error, debug, groups, masks) to stdout",
    no_args_is_help=True,
)


def _logger(ctx: typer.Context) -> Logger:
    return Logger(config=config_from_context(ctx))


def _options(
    title_text: Optional[str],
    file_path: Optional[str],
    line: Optional[int],
    end_line: Optional[int],
    col: Optional[int],
    end_column: Optional[int],
) -> list[AnnotationOption]:
    options: list[AnnotationOption] = []
    if title_text:
        options.append(title(title_text))
    if file_path:
        options.append(file(file_path))
    if line is not None:
        options.append(lines(line, end_line if end_line is not None else line))
    if col is not None:
        options.append(span(col, end_column if end_column is not None else col))
    return options


TitleOption = typer.Option(None, "--title", help="Annotation title")
FileOption = typer.Option(None, "--file", help="Source file to annotate")
LineOption = typer.Option(None, "--line", help="First line of the annotated range")
EndLineOption = typer.Option(None, "--end-line", help="Last line (defaults to --line)")
ColOption = typer.Option(None, "--col", help="First column, single-line ranges only")
EndColumnOption = typer.Option(None, "--end-column", help="Last column (defaults to --col)")


@log_app.command("notice")
def notice(
    ctx: typer.Context,
    message: str = typer.Argument(..., help="Message text"),
    title_text: Optional[str] = TitleOption,
    file_path: Optional[str] = FileOption,
    line: Optional[int] = LineOption,
    end_line: Optional[int] = EndLineOption,
    col: Optional[int] = ColOption,
    end_column: Optional[int] = EndColumnOption,
) -> None:
    """Write a notice, optionally annotating a source range."""
    _logger(ctx).notice(message, *_options(title_text, file_path, line, end_line, col, end_column))


@log_app.command("warning")
def warning(
    ctx: typer.Context,
    message: str = typer.Argument(..., help="Message text"),
    title_text: Optional[str] = TitleOption,
    file_path: Optional[str] = FileOption,
    line: Optional[int] = LineOption,
    end_line: Optional[int] = EndLineOption,
    col: Optional[int] = ColOption,
    end_column: Optional[int] = EndColumnOption,
) -> None:
    """Write a warning, optionally annotating a source range."""
    _logger(ctx).warning(message, *_options(title_text, file_path, line, end_line, col, end_column))


@log_app.command("error")
def error(
    ctx: typer.Context,
    message: str = typer.Argument(..., help="Message text"),
    title_text: Optional[str] = TitleOption,
    file_path: Optional[str] = FileOption,
    line: Optional[int] = LineOption,
    end_line: Optional[int] = EndLineOption,
    col: Optional[int] = ColOption,
    end_column: Optional[int] = EndColumnOption,
) -> None:
    """Write an error, optionally annotating a source range."""
    _logger(ctx).error(message, *_options(title_text, file_path, line, end_line, col, end_column))


@log_app.command("debug")
def debug(ctx: typer.Context, message: str = typer.Argument(..., help="Message text")) -> None:
    """Write a debug message (visible when the run has debug logging on)."""
    _logger(ctx).debug(message)


@log_app.command("mask")
def mask(ctx: typer.Context, value: str = typer.Argument(..., help="Secret to redact")) -> None:
    """Mask a value in all further log output."""
    _logger(ctx).mask(value)


@log_app.command("group")
def group(ctx: typer.Context, name: str = typer.Argument(..., help="Group title")) -> None:
    """Start a collapsible log group."""
    _logger(ctx).group(name)


@log_app.command("endgroup")
def endgroup(ctx: typer.Context) -> None:
    """End the current log group."""
    _logger(ctx).end_group()
