"""actionkit configuration."""

from actionkit.config.loader import load_config
from actionkit.config.schema import (
    ActionsConfig,
    DelimiterConfig,
    FileVariables,
    ReservedKeys,
)

__all__ = [
    "ActionsConfig",
    "DelimiterConfig",
    "FileVariables",
    "ReservedKeys",
    "load_config",
]
