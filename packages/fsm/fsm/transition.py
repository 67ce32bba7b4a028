"""Transition rule."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from fsm.types import Event, Hook, State, T


@dataclass(frozen=True)
class Transition(Generic[T]):
    """Path from one state to another through an event.

    ``before`` runs ahead of the state change and can block it by raising
    (e.g. check a balance is above zero). ``after`` runs once the new state
    is in place and is meant for side effects such as saving to a database.
    """

    from_state: State
    event: Event
    to_state: State
    before: Hook[T] | None = None
    after: Hook[T] | None = None

    def matches(self, state: State, event: Event) -> bool:
        return self.from_state == state and self.event == event
