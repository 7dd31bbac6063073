"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, List

from pair_actions.config import reset_action_defaults


class Recorder:
    """Collects every value emitted by an action, in order."""

    def __init__(self) -> None:
        self.values: List[Any] = []

    def __call__(self, value: Any) -> None:
        self.values.append(value)


class PairRecorder:
    """A class-based pair action recording each (a, b) it is applied to."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def apply(self, a: Any, b: Any) -> None:
        self.calls.append((a, b))


@pytest.fixture
def recorder() -> Recorder:
    """Emit target collecting values."""
    return Recorder()


@pytest.fixture
def pair_recorder() -> PairRecorder:
    """Pair action collecting inputs."""
    return PairRecorder()


@pytest.fixture
def event_log() -> List[str]:
    """Shared list actions append labels to, for checking order."""
    return []


@pytest.fixture
def sample_names() -> List[str]:
    """Mutable sequence used by collection update tests."""
    return ["John", "Jane", "Doe"]


@pytest.fixture(autouse=True)
def restore_action_defaults():
    """Undo any action defaults installed by ConfigLoader.apply."""
    yield
    reset_action_defaults()
