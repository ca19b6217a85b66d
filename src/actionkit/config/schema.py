"""Pydantic configuration models for actionkit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FileVariables(BaseModel):
    """Names of the indirection variables pointing at workflow files.

    Each value names an environment variable whose *value* is the path of the
    real file the runner consumes after the step finishes.
    """

    env: str = "GITHUB_ENV"
    output: str = "GITHUB_OUTPUT"
    state: str = "GITHUB_STATE"
    summary: str = "GITHUB_STEP_SUMMARY"
    path: str = "GITHUB_PATH"

    model_config = ConfigDict(frozen=True, extra="forbid")


class ReservedKeys(BaseModel):
    """Environment keys a step must never overwrite through $GITHUB_ENV."""

    names: list[str] = Field(default_factory=lambda: ["CI", "NODE_OPTIONS"])
    prefixes: list[str] = Field(default_factory=lambda: ["GITHUB_", "RUNNER_"])

    model_config = ConfigDict(frozen=True, extra="forbid")

    def is_reserved(self, key: str) -> bool:
        if key in self.names:
            return True
        return any(key.startswith(prefix) for prefix in self.prefixes)


class DelimiterConfig(BaseModel):
    """Shape of the delimiter wrapped around multiline values."""

    prefix: str = "ghadelimiter_"
    length: int = Field(default=16, ge=8)

    model_config = ConfigDict(frozen=True, extra="forbid")


class ActionsConfig(BaseModel):
    """Root configuration model."""

    files: FileVariables = Field(default_factory=FileVariables)
    reserved: ReservedKeys = Field(default_factory=ReservedKeys)
    delimiter: DelimiterConfig = Field(default_factory=DelimiterConfig)
    path_variable: str = "PATH"
    debug_variable: str = "RUNNER_DEBUG"
    input_prefix: str = "INPUT_"

    model_config = ConfigDict(frozen=True, extra="forbid")
