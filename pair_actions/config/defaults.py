"""Default configuration parameters for pair actions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActionDefaults:
    """Defaults used by the bundled example actions."""
    error_marker: str = "error"                      # Emitted by safe_divide on division by zero
    print_template: str = "{a}={b}"                  # Used by print_pair


@dataclass(frozen=True)
class LoggingParams:
    """Arguments passed to configure_logging."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    actions: ActionDefaults
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        actions=ActionDefaults(),
        logging=LoggingParams(),
    )


_active_actions = ActionDefaults()


def get_action_defaults() -> ActionDefaults:
    """Get the action defaults currently in effect."""
    return _active_actions


def set_action_defaults(actions: ActionDefaults) -> None:
    """Replace the action defaults read by the bundled actions."""
    global _active_actions
    _active_actions = actions


def reset_action_defaults() -> None:
    """Restore the built-in action defaults."""
    set_action_defaults(ActionDefaults())
