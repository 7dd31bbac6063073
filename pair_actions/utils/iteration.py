"""
Apply a pair action across the pairs held by a container.

All helpers stop at the first failure and let it propagate.
"""

from typing import Any, Iterable, Mapping, Sequence

from ..core import as_action


def for_each_entry(mapping: Mapping[Any, Any], action: Any) -> None:
    """Apply ``action`` to every ``(key, value)`` pair in iteration order."""
    act = as_action(action)
    for key, value in mapping.items():
        act.apply(key, value)


def for_each_indexed(sequence: Sequence[Any], action: Any) -> None:
    """Apply ``action`` to every ``(index, item)`` pair."""
    act = as_action(action)
    for index, item in enumerate(sequence):
        act.apply(index, item)


def zip_apply(left: Iterable[Any], right: Iterable[Any], action: Any, strict: bool = True) -> None:
    """
    Apply ``action`` to pairwise-aligned items of ``left`` and ``right``.

    Raises:
        ValueError: If ``strict`` and the inputs differ in length. The length
            check happens before any item is applied.
    """
    act = as_action(action)
    left_items = list(left)
    right_items = list(right)

    if strict and len(left_items) != len(right_items):
        raise ValueError(
            f"zip_apply() inputs differ in length: {len(left_items)} != {len(right_items)}"
        )

    for a, b in zip(left_items, right_items):
        act.apply(a, b)
