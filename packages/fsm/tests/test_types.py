"""Tests for TransitionError, Transition and the Stateful protocol."""
import dataclasses

import pytest

from fsm import Stateful, Transition, TransitionError


class TestTransitionError:

    def test_message(self):
        err = TransitionError("test", "collect")

        assert str(err) == "invalid transition from test with event collect"

    def test_attributes(self):
        err = TransitionError("idle", "go")

        assert err.from_state == "idle"
        assert err.event == "go"

    def test_is_exception(self):
        assert issubclass(TransitionError, Exception)


class TestTransition:

    def test_defaults(self):
        t = Transition("a", "go", "b")

        assert t.before is None
        assert t.after is None

    def test_frozen(self):
        t = Transition("a", "go", "b")

        with pytest.raises(dataclasses.FrozenInstanceError):
            t.to_state = "c"

    def test_matches(self):
        t = Transition("a", "go", "b")

        assert t.matches("a", "go") is True
        assert t.matches("a", "stop") is False
        assert t.matches("b", "go") is False


class TestStateful:

    def test_item_with_set_state(self):
        class Switch:
            def set_state(self, state):
                self.state = state

        assert isinstance(Switch(), Stateful)

    def test_item_without_set_state(self):
        assert not isinstance(object(), Stateful)
