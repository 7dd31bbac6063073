"""Configuration defaults, loading and validation."""

from .defaults import (
    ActionDefaults,
    DefaultConfig,
    LoggingParams,
    get_action_defaults,
    get_default_config,
    reset_action_defaults,
    set_action_defaults,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ActionDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "ValidationError",
    "get_action_defaults",
    "get_default_config",
    "reset_action_defaults",
    "set_action_defaults",
]
