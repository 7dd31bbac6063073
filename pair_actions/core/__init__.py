"""Core PairAction abstraction and its combinators."""

from .action import Action, PairAction, as_action, pair_action
from .chain import SequencedAction, and_then, chain, noop
from .guard import guarded, wrap_errors

__all__ = [
    "Action",
    "PairAction",
    "SequencedAction",
    "and_then",
    "as_action",
    "chain",
    "guarded",
    "noop",
    "pair_action",
    "wrap_errors",
]
