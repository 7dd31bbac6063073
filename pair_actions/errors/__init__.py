"""
Error classification for pair actions.

The core abstraction owns no recovery of its own: failures raised inside an
action propagate unchanged. These types cover the few cases where the
package itself has something to report.
"""

from .action_failures import (
    PairActionError,
    ActionTypeError,
    ActionExecutionError,
    ConfigurationError,
)

__all__ = [
    "PairActionError",
    "ActionTypeError",
    "ActionExecutionError",
    "ConfigurationError",
]
