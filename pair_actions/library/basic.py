"""Actions that emit a value derived from both inputs."""

from typing import Any, Callable, Optional

from ..config import get_action_defaults
from ..core import Action, guarded
from ..logging import get_logger

Emit = Callable[[Any], Any]


def concat(emit: Emit) -> Action[str, str]:
    """Emit ``a + b``."""
    return Action(lambda a, b: emit(a + b), name="concat")


def safe_divide(emit: Emit, error_marker: Optional[str] = None) -> Action[int, int]:
    """
    Emit ``a`` divided by ``b``.

    Exact divisions are emitted as ``a // b`` so that ``(10, 2)`` emits ``5``
    rather than ``5.0``. Division by zero is handled inside the action: the
    error marker is emitted and nothing is raised.
    """
    if error_marker is None:
        error_marker = get_action_defaults().error_marker

    def divide(a: int, b: int) -> None:
        if a % b == 0:
            emit(a // b)
        else:
            emit(a / b)

    return guarded(
        Action(divide, name="safe_divide"),
        lambda exc, a, b: emit(error_marker),
        exceptions=ZeroDivisionError,
    )


def print_pair(template: Optional[str] = None, emit: Optional[Emit] = None) -> Action:
    """
    Format the pair with ``template`` and emit it.

    Without ``emit`` the text is logged at INFO through the package logger.
    """
    if template is None:
        template = get_action_defaults().print_template

    def show(a: Any, b: Any) -> None:
        text = template.format(a=a, b=b)
        if emit is None:
            get_logger(__name__).info(text)
        else:
            emit(text)

    return Action(show, name="print_pair")
