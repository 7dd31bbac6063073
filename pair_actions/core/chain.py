"""
Sequencing of pair actions.

``and_then`` runs two actions over the same pair of inputs, strictly left to
right. Nothing flows from one step to the next except the original inputs.
If a step raises, later steps do not run and the error propagates unchanged.
"""

from functools import reduce
from typing import Any, Sequence

from ..errors import ActionTypeError
from ..logging import get_chain_logger, log_action_step
from .action import A, B, Action, as_action


class SequencedAction(Action[A, B]):
    """An action made of ordered steps sharing one pair of inputs."""

    def __init__(self, steps: Sequence[Action]):
        self.steps = tuple(steps)
        super().__init__(self._run, name=" -> ".join(step.name for step in self.steps))

    def _run(self, a: A, b: B) -> None:
        logger = get_chain_logger(__name__)
        total = len(self.steps)

        for index, step in enumerate(self.steps, start=1):
            try:
                step.apply(a, b)
            except Exception as exc:
                log_action_step(logger, step.name, index, total, error=exc)
                raise
            log_action_step(logger, step.name, index, total)


def _steps_of(action: Action) -> tuple:
    if isinstance(action, SequencedAction):
        return action.steps
    return (action,)


def and_then(first: Any, second: Any) -> SequencedAction:
    """
    Compose two actions over the same inputs.

    The result applies ``first`` to (a, b), then ``second`` to (a, b). A
    failure in ``first`` prevents ``second`` from running.
    """
    first_action = as_action(first)
    second_action = as_action(second)
    return SequencedAction(_steps_of(first_action) + _steps_of(second_action))


def chain(*actions: Any) -> Action:
    """Left fold of ``and_then`` over one or more actions."""
    if not actions:
        raise ActionTypeError("chain() requires at least one action")
    if len(actions) == 1:
        return as_action(actions[0])
    return reduce(and_then, actions)


def noop() -> Action:
    """An action that does nothing."""
    return Action(lambda a, b: None, name="noop")
