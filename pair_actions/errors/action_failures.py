"""
Exceptions raised by the pair action package itself.

Errors raised by action bodies are never translated here unless the caller
explicitly asks for wrapping.
"""

from typing import Any, Optional, Dict


class PairActionError(Exception):
    """Base class for errors owned by the pair action package."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ActionTypeError(PairActionError, TypeError):
    """Object cannot be used as a pair action."""

    def __init__(self, message: str, received_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.received_type = received_type


class ActionExecutionError(PairActionError):
    """An action body failed and the caller asked for the failure to be wrapped."""

    def __init__(self, message: str, action_name: Optional[str] = None,
                 inputs: Optional[tuple] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.action_name = action_name
        self.inputs = inputs
        self.recoverable = True


class ConfigurationError(PairActionError):
    """Configuration values failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
