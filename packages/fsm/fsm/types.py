"""Shared type aliases, protocols and errors for the state machine."""
from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

State = str
Event = str

T = TypeVar("T")

Hook = Callable[[T], None]
"""Called with the machine's item. Signals failure by raising."""


class TransitionError(Exception):
    """Raised when no transition matches the current state and event."""

    def __init__(self, from_state: State, event: Event) -> None:
        self.from_state = from_state
        self.event = event
        super().__init__(f"invalid transition from {from_state} with event {event}")


@runtime_checkable
class Stateful(Protocol):
    """Item that can mirror the machine's state.

    The machine never calls ``set_state``; hooks that want the item kept
    in sync must do it themselves.
    """

    def set_state(self, state: State) -> None: ...
