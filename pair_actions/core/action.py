"""
The PairAction abstraction.

A PairAction accepts two values and performs a side effect with them,
returning nothing. It holds no state of its own; whatever it mutates belongs
to the caller. Failures raised by an action body propagate unchanged.
"""

from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, runtime_checkable

from ..errors import ActionTypeError

A = TypeVar("A", contravariant=True)
B = TypeVar("B", contravariant=True)


@runtime_checkable
class PairAction(Protocol[A, B]):
    """Anything with an ``apply(a, b)`` method returning nothing."""

    def apply(self, a: A, b: B) -> None:
        ...


class Action(Generic[A, B]):
    """
    Concrete PairAction wrapping a plain two-argument function.

    The wrapped function is called exactly once per ``apply`` with the inputs
    as given. Its return value, if any, is discarded.
    """

    def __init__(self, fn: Callable[[A, B], Any], name: Optional[str] = None):
        if not callable(fn):
            raise ActionTypeError(
                f"Action requires a callable, got {type(fn).__name__}",
                received_type=type(fn).__name__,
            )
        self._fn = fn
        if name is None:
            name = getattr(fn, "__qualname__", None) or type(fn).__name__
        self.name = name

    def apply(self, a: A, b: B) -> None:
        """Run the side effect with ``a`` and ``b``."""
        self._fn(a, b)

    def __call__(self, a: A, b: B) -> None:
        self.apply(a, b)

    def and_then(self, second: Any) -> "Action[A, B]":
        """Return an action running this one, then ``second``, on the same inputs."""
        from .chain import and_then

        return and_then(self, second)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def as_action(obj: Any) -> Action:
    """
    Coerce ``obj`` into an Action.

    Accepts an Action (returned as is), any object implementing
    ``apply(a, b)``, or a plain two-argument callable.

    Raises:
        ActionTypeError: If ``obj`` is none of the above
    """
    if isinstance(obj, Action):
        return obj
    if isinstance(obj, PairAction) and callable(obj.apply):
        return Action(obj.apply, name=type(obj).__name__)
    if callable(obj):
        return Action(obj)
    raise ActionTypeError(
        f"Cannot use {type(obj).__name__} as a pair action",
        received_type=type(obj).__name__,
    )


def pair_action(fn: Optional[Callable[[Any, Any], Any]] = None, *, name: Optional[str] = None) -> Any:
    """
    Turn a two-argument function into an Action.

    Usable bare (``@pair_action``) or with a name (``@pair_action(name="log")``).
    """
    def decorate(func: Callable[[Any, Any], Any]) -> Action:
        return Action(func, name=name)

    if fn is None:
        return decorate
    return decorate(fn)
