"""Actions that update a caller-owned container."""

from typing import Any, MutableMapping, MutableSequence

from ..core import Action


def replace_at(sequence: MutableSequence[Any]) -> Action[int, Any]:
    """
    Overwrite ``sequence[index]`` with ``value``.

    Out-of-range indices raise IndexError; the sequence is left unchanged.
    """
    def replace(index: int, value: Any) -> None:
        sequence[index] = value

    return Action(replace, name="replace_at")


def put_entry(mapping: MutableMapping[Any, Any]) -> Action[Any, Any]:
    """Store ``mapping[key] = value``."""
    def put(key: Any, value: Any) -> None:
        mapping[key] = value

    return Action(put, name="put_entry")
