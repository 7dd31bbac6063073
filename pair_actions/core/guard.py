"""
Caller-chosen error policies for pair actions.

By default a failure inside an action propagates. These wrappers let the
call site either handle selected exceptions locally or translate every
failure into an ActionExecutionError.
"""

from typing import Any, Callable, Tuple, Type, Union

from ..errors import ActionExecutionError, ActionTypeError
from ..logging import get_logger
from .action import A, B, Action, as_action

ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


def guarded(
    action: Any,
    on_error: Callable[[BaseException, Any, Any], Any],
    exceptions: ExceptionTypes = (Exception,),
) -> Action:
    """
    Handle selected exceptions raised by ``action`` locally.

    Args:
        action: Action to protect
        on_error: Called as ``on_error(exc, a, b)`` when a listed exception is raised
        exceptions: Exception type or tuple of types to handle; others propagate

    Returns:
        A new action that never raises the listed exception types itself
        (unless ``on_error`` does)
    """
    inner = as_action(action)
    if isinstance(exceptions, type):
        exceptions = (exceptions,)

    def run(a: A, b: B) -> None:
        try:
            inner.apply(a, b)
        except exceptions as exc:
            get_logger(__name__).debug(
                "Action error handled",
                action=inner.name,
                error_type=type(exc).__name__,
            )
            on_error(exc, a, b)

    return Action(run, name=f"guarded({inner.name})")


def wrap_errors(action: Any, error_cls: Type[ActionExecutionError] = ActionExecutionError) -> Action:
    """
    Re-raise any failure of ``action`` as ``error_cls``.

    The original exception is chained as ``__cause__`` and the inputs are
    kept on the raised error.
    """
    if not (isinstance(error_cls, type) and issubclass(error_cls, ActionExecutionError)):
        raise ActionTypeError(
            "error_cls must be a subclass of ActionExecutionError",
            received_type=getattr(error_cls, "__name__", type(error_cls).__name__),
        )
    inner = as_action(action)

    def run(a: A, b: B) -> None:
        try:
            inner.apply(a, b)
        except ActionExecutionError:
            raise
        except Exception as exc:
            raise error_cls(
                f"{inner.name} failed: {exc}",
                action_name=inner.name,
                inputs=(a, b),
                context={"error_type": type(exc).__name__},
            ) from exc

    return Action(run, name=inner.name)
