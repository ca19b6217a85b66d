"""Helpers shared by CLI command groups."""

from __future__ import annotations

from typing import Any, Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from actionkit.config.loader import load_config
from actionkit.config.schema import ActionsConfig


def config_from_context(ctx: typer.Context) -> ActionsConfig:
    """Load the config selected by the root ``--config`` option."""
    obj: Optional[dict[str, Any]] = ctx.find_root().obj
    config_path = obj.get("config_path") if obj else None
    try:
        return load_config(config_path)
    except (FileNotFoundError, PydanticValidationError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
