"""Tests for and_then sequencing."""

import pytest
from structlog.testing import capture_logs

from pair_actions.core import Action, SequencedAction, and_then, chain, noop
from pair_actions.errors import ActionTypeError


def labelled(event_log, label):
    """Action appending ``label`` and its inputs to ``event_log``."""
    return Action(lambda a, b: event_log.append((label, a, b)), name=label)


def failing(event_log, label, error=ValueError):
    """Action recording ``label`` then raising ``error``."""
    def run(a, b):
        event_log.append((label, a, b))
        raise error(label)

    return Action(run, name=label)


class TestAndThen:
    """Test ordering and short-circuit behaviour."""

    def test_runs_first_then_second_with_same_inputs(self, event_log):
        combined = and_then(labelled(event_log, "P"), labelled(event_log, "Q"))

        combined.apply("a", 1)

        assert event_log == [("P", "a", 1), ("Q", "a", 1)]

    def test_each_action_runs_once_per_apply(self, event_log):
        combined = and_then(labelled(event_log, "P"), labelled(event_log, "Q"))

        combined.apply(1, 2)
        combined.apply(3, 4)

        assert event_log == [("P", 1, 2), ("Q", 1, 2), ("P", 3, 4), ("Q", 3, 4)]

    def test_first_failure_skips_second(self, event_log):
        combined = and_then(failing(event_log, "P"), labelled(event_log, "Q"))

        with pytest.raises(ValueError, match="P"):
            combined.apply("a", "b")

        assert event_log == [("P", "a", "b")]

    def test_second_failure_propagates_after_first(self, event_log):
        combined = and_then(labelled(event_log, "P"), failing(event_log, "Q", RuntimeError))

        with pytest.raises(RuntimeError):
            combined.apply(0, 0)

        assert [label for label, _, _ in event_log] == ["P", "Q"]

    def test_accepts_plain_callables_and_pair_actions(self, pair_recorder, event_log):
        combined = and_then(lambda a, b: event_log.append("fn"), pair_recorder)

        combined.apply(5, 6)

        assert event_log == ["fn"]
        assert pair_recorder.calls == [(5, 6)]

    def test_nested_sequences_are_flattened(self, event_log):
        inner = and_then(labelled(event_log, "P"), labelled(event_log, "Q"))
        outer = and_then(inner, labelled(event_log, "R"))

        assert isinstance(outer, SequencedAction)
        assert [step.name for step in outer.steps] == ["P", "Q", "R"]
        assert outer.name == "P -> Q -> R"

    def test_composition_does_not_mutate_operands(self, event_log):
        first = and_then(labelled(event_log, "P"), labelled(event_log, "Q"))
        and_then(first, labelled(event_log, "R"))

        first.apply(None, None)

        assert [label for label, _, _ in event_log] == ["P", "Q"]

    def test_invalid_operand_rejected(self, event_log):
        with pytest.raises(ActionTypeError):
            and_then(labelled(event_log, "P"), "nope")


class TestChain:
    """Test the variadic fold."""

    def test_chain_preserves_order(self, event_log):
        chain(*(labelled(event_log, label) for label in "ABCD")).apply(1, 2)

        assert [label for label, _, _ in event_log] == ["A", "B", "C", "D"]

    def test_chain_short_circuits(self, event_log):
        combined = chain(
            labelled(event_log, "A"),
            failing(event_log, "B"),
            labelled(event_log, "C"),
        )

        with pytest.raises(ValueError):
            combined.apply(1, 2)

        assert [label for label, _, _ in event_log] == ["A", "B"]

    def test_single_action(self, event_log):
        action = labelled(event_log, "A")
        assert chain(action) is action

    def test_empty_chain_rejected(self):
        with pytest.raises(ActionTypeError):
            chain()

    def test_noop_is_neutral(self, event_log):
        combined = and_then(noop(), and_then(labelled(event_log, "P"), noop()))

        combined.apply("x", "y")

        assert event_log == [("P", "x", "y")]


class TestChainLogging:
    """Test step logging of sequenced actions."""

    def test_successful_steps_logged_at_debug(self, event_log):
        combined = and_then(labelled(event_log, "P"), labelled(event_log, "Q"))

        with capture_logs() as logs:
            combined.apply(1, 2)

        steps = [entry for entry in logs if entry["event"] == "Action step completed"]
        assert [entry["action"] for entry in steps] == ["P", "Q"]
        assert all(entry["log_level"] == "debug" for entry in steps)
        assert all(entry["subsystem"] == "chain" for entry in steps)
        assert steps[-1]["step"] == 2
        assert steps[-1]["total_steps"] == 2

    def test_failed_step_logged_at_warning(self, event_log):
        combined = and_then(failing(event_log, "P", KeyError), labelled(event_log, "Q"))

        with capture_logs() as logs:
            with pytest.raises(KeyError):
                combined.apply(1, 2)

        failures = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(failures) == 1
        assert failures[0]["action"] == "P"
        assert failures[0]["error_type"] == "KeyError"
        assert failures[0]["skipped"] == 1
