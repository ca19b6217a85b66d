"""Workflow commands written to the runner's log.

See https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/workflow-commands-for-github-actions
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Optional, TextIO

from actionkit.config.schema import ActionsConfig
from actionkit.core.protocol.annotations import AnnotationOption, build_annotation
from actionkit.core.protocol.escape import escape_data

logger = logging.getLogger(__name__)


def render_command(command: str, message: str, *options: AnnotationOption) -> str:
    """Render a single workflow command line.

    Returns an empty string when ``message`` is empty; the runner gets
    confused by empty commands, so callers should write nothing at all.

    Args:
        command: Command keyword, e.g. ``notice`` or ``add-mask``.
        message: Raw message text, escaped here.
        *options: Annotation options (see ``actionkit.core.protocol.annotations``).

    Returns:
        ``::command[ fields]::message`` followed by a newline, or ``""``.
    """
    if message == "":
        return ""

    escaped = escape_data(message)
    if not options:
        return f"::{command}::{escaped}\n"

    try:
        fields = build_annotation(*options).render()
    except (AttributeError, TypeError, ValueError) as exc:
        logger.warning("Dropping annotation from ::%s:: command: %s", command, exc)
        fields = ""

    if not fields:
        return f"::{command}::{escaped}\n"
    return f"::{command} {fields}::{escaped}\n"


class Logger:
    """Writes workflow commands to the runner log.

    Holds no state other than the stream commands go to, the environment it
    reads ``RUNNER_DEBUG`` from and the config naming that variable.

    Example:
        log = Logger()
        log.warning("Deprecated input", title("Config"), file("action.yml"), lines(12, 12))
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        environ: Optional[Mapping[str, str]] = None,
        config: Optional[ActionsConfig] = None,
    ):
        self._out = out
        self._environ = environ
        self._config = config or ActionsConfig()

    @property
    def out(self) -> TextIO:
        # Resolved lazily so pytest's capsys replacement of sys.stdout is seen.
        return self._out if self._out is not None else sys.stdout

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def _emit(self, line: str) -> None:
        if not line:
            return
        self.out.write(line)
        self.out.flush()

    def is_debug(self) -> bool:
        """Report whether the runner has debug logging switched on."""
        return self.environ.get(self._config.debug_variable) == "1"

    def debug(self, message: str, *args: Any) -> None:
        """Write a debug message, only shown when debug logging is on.

        With ``args`` the message is ``%``-formatted, otherwise it is used verbatim.
        """
        if message == "":
            return
        if args:
            message = message % args
        self._emit(render_command("debug", message))

    def notice(self, message: str, *options: AnnotationOption) -> None:
        self._emit(render_command("notice", message, *options))

    def warning(self, message: str, *options: AnnotationOption) -> None:
        self._emit(render_command("warning", message, *options))

    def error(self, message: str, *options: AnnotationOption) -> None:
        self._emit(render_command("error", message, *options))

    def mask(self, value: str) -> None:
        """Register a secret so the runner redacts it from the log."""
        self._emit(render_command("add-mask", value))

    def group(self, title: str) -> None:
        """Start a collapsible log group."""
        self._emit(render_command("group", title))

    def end_group(self) -> None:
        self._emit("::endgroup::\n")

    @contextmanager
    def grouped(self, title: str) -> Iterator[None]:
        """Wrap a block of output in a collapsible log group."""
        self.group(title)
        try:
            yield
        finally:
            self.end_group()
