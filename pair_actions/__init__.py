"""
Pair Actions - two-argument side-effecting callbacks.

A PairAction takes two values, does something with them and returns nothing.
Actions compose with ``and_then`` into strict left-to-right sequences that
share the same pair of inputs.
"""

from .core import Action, PairAction, and_then, as_action, chain, guarded, noop, pair_action, wrap_errors

__version__ = "0.1.0"
__author__ = "Pair Actions Team"

__all__ = [
    "Action",
    "PairAction",
    "and_then",
    "as_action",
    "chain",
    "guarded",
    "noop",
    "pair_action",
    "wrap_errors",
]
