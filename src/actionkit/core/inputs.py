"""Typed access to action inputs (``with:`` values exposed as $INPUT_*)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from actionkit.config.schema import ActionsConfig
from actionkit.core.errors import ConfigurationError, ValidationError

_TRUE = {"true", "True", "TRUE"}
_FALSE = {"false", "False", "FALSE"}


class Inputs:
    """Reads action inputs from the environment."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        config: Optional[ActionsConfig] = None,
    ):
        self._environ = environ
        self.config = config or ActionsConfig()

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def variable_for(self, name: str) -> str:
        return self.config.input_prefix + name.replace(" ", "_").upper()

    def get(self, name: str) -> tuple[str, bool]:
        """Return the stripped input value and whether it was defined."""
        if not name:
            return "", False
        value = self.environ.get(self.variable_for(name))
        if value is None:
            return "", False
        return value.strip(), True

    def _require(self, name: str) -> str:
        value, ok = self.get(name)
        if not ok:
            raise ConfigurationError(
                self.variable_for(name), f"input variable {name!r} not defined"
            )
        return value

    def bool(self, name: str) -> bool:
        """Parse a YAML 1.2 core-schema boolean input."""
        value = self._require(name)
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ValidationError(f"input variable {name!r} is invalid bool: {value!r}")

    def lines(self, name: str) -> list[str]:
        """Split a multiline input, stripping each line."""
        value = self._require(name)
        return [line.strip() for line in value.splitlines()]

    def int(self, name: str) -> int:
        value = self._require(name)
        try:
            return int(value)
        except ValueError as exc:
            raise ValidationError(f"input variable {name!r} is invalid integer: {value!r}") from exc

    def float(self, name: str) -> float:
        value = self._require(name)
        try:
            return float(value)
        except ValueError as exc:
            raise ValidationError(f"input variable {name!r} is invalid float: {value!r}") from exc
