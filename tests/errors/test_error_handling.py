"""
Error handling tests for pair actions.

Covers the error hierarchy and the rule that action failures propagate
unchanged unless the caller opts into a policy.
"""

import pytest

from pair_actions import Action, and_then, guarded, wrap_errors
from pair_actions.errors import (
    PairActionError,
    ActionTypeError,
    ActionExecutionError,
    ConfigurationError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_base_error_defaults(self):
        error = PairActionError("base error")
        assert error.context == {}
        assert error.recoverable is False
        assert str(error) == "base error"

    def test_error_hierarchy(self):
        type_error = ActionTypeError("bad action", received_type="int")
        assert isinstance(type_error, PairActionError)
        assert isinstance(type_error, TypeError)
        assert type_error.received_type == "int"

        execution_error = ActionExecutionError(
            "failed", action_name="copy", inputs=("a", "b"), context={"attempt": 1}
        )
        assert isinstance(execution_error, PairActionError)
        assert execution_error.recoverable is True
        assert execution_error.inputs == ("a", "b")
        assert execution_error.context == {"attempt": 1}

        config_error = ConfigurationError("invalid", errors=["level"])
        assert config_error.errors == ["level"]
        assert ConfigurationError("invalid").errors == []


class TestPropagation:
    """Test that failures are not swallowed by default."""

    def test_action_error_is_not_translated(self):
        def explode(a, b):
            raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            Action(explode).apply(1, 2)

    def test_combined_action_reraises_same_instance(self):
        error = RuntimeError("boom")

        def explode(a, b):
            raise error

        with pytest.raises(RuntimeError) as exc_info:
            and_then(explode, lambda a, b: None).apply(1, 2)

        assert exc_info.value is error

    def test_handler_errors_propagate(self):
        def reraise_as_value_error(exc, a, b):
            raise ValueError("handler failed") from exc

        action = guarded(lambda a, b: a / b, reraise_as_value_error, ZeroDivisionError)

        with pytest.raises(ValueError, match="handler failed"):
            action.apply(1, 0)

    def test_wrapped_error_chain_keeps_original(self):
        def explode(a, b):
            raise PermissionError(a)

        with pytest.raises(ActionExecutionError) as exc_info:
            wrap_errors(explode).apply("/root/file", None)

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert "/root/file" in str(exc_info.value)
