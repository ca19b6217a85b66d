"""Environment files: $GITHUB_ENV, $GITHUB_OUTPUT, $GITHUB_STATE and friends.

Steps talk to the runner (and to later steps) by appending records to files
whose paths are handed over through environment variables. Each record is
either ``KEY=value`` or, for values spanning several lines::

    KEY<<ghadelimiter_3vQ0c8PLm2yRt7Xa
    first line
    second line
    ghadelimiter_3vQ0c8PLm2yRt7Xa

See https://docs.github.com/en/actions/writing-workflows/choosing-what-your-workflow-does/workflow-commands-for-github-actions#environment-files
"""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from pathlib import Path
from typing import Literal, Optional

from actionkit.config.schema import ActionsConfig
from actionkit.core.errors import ConfigurationError, TargetFileError, ValidationError
from actionkit.core.protocol.delimiter import DelimiterSource, RandomDelimiterSource

logger = logging.getLogger(__name__)

FileTarget = Literal["env", "output", "state", "summary", "path"]

# Any of these in a key would split or corrupt its record.
_FORBIDDEN_KEY_CHARS = ("=", "\r", "\n", "\0")


class WorkflowFiles:
    """Writes records to the runner's environment files.

    Args:
        config: Names of the indirection variables and reserved keys.
        environ: Environment to resolve file paths from and to update after
            env/path writes. Defaults to ``os.environ``.
        delimiters: Source of multiline delimiters.
    """

    def __init__(
        self,
        config: Optional[ActionsConfig] = None,
        environ: Optional[MutableMapping[str, str]] = None,
        delimiters: Optional[DelimiterSource] = None,
    ):
        self.config = config or ActionsConfig()
        self._environ = environ
        self.delimiters = delimiters or RandomDelimiterSource(self.config.delimiter)

    @property
    def environ(self) -> MutableMapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def variable_for(self, target: FileTarget) -> str:
        return getattr(self.config.files, target)

    def resolve(self, target: FileTarget) -> Path:
        """Return the file path behind a target's indirection variable.

        Raises:
            ConfigurationError: If the variable is unset or empty.
        """
        variable = self.variable_for(target)
        value = self.environ.get(variable, "").strip()
        if not value:
            raise ConfigurationError(variable)
        return Path(value)

    def encode_record(self, key: str, value: str) -> str:
        """Serialize one record, choosing the multiline form when needed."""
        if "\n" in value:
            delimiter = self.delimiters.new_delimiter()
            return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"
        return f"{key}={value}\n"

    def _append(self, target: FileTarget, text: str) -> Path:
        variable = self.variable_for(target)
        path = self.resolve(target)
        try:
            # O_APPEND without O_CREAT: the runner owns these files.
            fd = os.open(path, os.O_WRONLY | os.O_APPEND)
            with os.fdopen(fd, "a", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as exc:
            raise TargetFileError(path, variable, exc) from exc
        return path

    def write_record(self, target: FileTarget, key: str, value: str) -> Path:
        """Validate and append a key/value record to a target file.

        Key and value are stripped of surrounding whitespace and must not be
        empty afterwards.

        Returns:
            The path that was written to.

        Raises:
            ValidationError: Empty key or value, a key containing ``=``, a line
                break or NUL, a value containing NUL, or a reserved env key.
            ConfigurationError: The target's indirection variable is not set.
            TargetFileError: The file could not be opened or written.
        """
        key = key.strip()
        value = value.strip()
        if not key:
            raise ValidationError("key cannot be empty")
        if not value:
            raise ValidationError("value cannot be empty")
        if any(ch in key for ch in _FORBIDDEN_KEY_CHARS):
            raise ValidationError(f"key {key!r} cannot contain '=', line breaks or NUL")
        if "\0" in value:
            raise ValidationError(f"value for {key} cannot contain NUL")
        if target == "env" and self.config.reserved.is_reserved(key):
            raise ValidationError(f"setting ${key} is disallowed")

        path = self._append(target, self.encode_record(key, value))
        logger.debug(
            "Wrote %s record %s to %s",
            "multiline" if "\n" in value else "single-line",
            key,
            path,
        )
        return path

    def set_env(self, key: str, value: str) -> None:
        """Set an environment variable for this and every following step.

        Keys such as ``CI``, ``NODE_OPTIONS`` and anything under ``GITHUB_``
        or ``RUNNER_`` are refused.
        """
        self.write_record("env", key, value)
        # The file only affects later steps; mirror it into this process too.
        self.environ[key.strip()] = value.strip()

    def get_env(self, key: str) -> tuple[str, bool]:
        """Look up an environment variable, reporting whether it is defined."""
        if key not in self.environ:
            return "", False
        return self.environ[key], True

    def set_output(self, key: str, value: str) -> None:
        """Set a step output readable as ``steps.<id>.outputs.<key>``."""
        self.write_record("output", key, value)

    def save_state(self, key: str, value: str) -> None:
        """Save state for the action's pre/post scripts (``STATE_<key>``)."""
        self.write_record("state", key, value)

    def write_summary(self, markdown: str) -> Path:
        """Replace the job summary with ``markdown``.

        Unlike the other files the summary is overwritten on every call and
        created if it does not exist yet.
        """
        variable = self.variable_for("summary")
        path = self.resolve("summary")
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(markdown)
        except OSError as exc:
            raise TargetFileError(path, variable, exc) from exc
        logger.debug("Wrote %d characters of step summary to %s", len(markdown), path)
        return path

    def add_path(self, path: str) -> None:
        """Prepend a directory to PATH for this and every following step."""
        path = path.strip()
        if not path:
            raise ValidationError("path cannot be empty")
        if any(ch in path for ch in ("\r", "\n", "\0")):
            raise ValidationError(f"path {path!r} cannot contain line breaks or NUL")

        written = self._append("path", f"{path}\n")
        logger.debug("Added %s to %s", path, written)

        current = self.environ.get(self.config.path_variable, "")
        self.environ[self.config.path_variable] = f"{path}{os.pathsep}{current}" if current else path
