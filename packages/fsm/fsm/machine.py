"""FSM - current state, owned item, and event dispatch."""
from __future__ import annotations

import logging
from typing import Generic

from fsm.transition import Transition
from fsm.types import Event, State, T, TransitionError

logger = logging.getLogger(__name__)


class FSM(Generic[T]):
    """Finite state machine over an item of type ``T``.

    Holds the item's current state and an ordered set of allowed
    transitions. Rules are kept in the given order and are not validated;
    when several match, the first one wins.

    Not thread-safe. Callers sharing a machine across threads must lock
    around ``handle_event`` and ``state`` themselves.
    """

    def __init__(self, initial: State, item: T, *transitions: Transition[T]) -> None:
        self._item = item
        self._state = initial
        self._transitions = transitions

    @property
    def state(self) -> State:
        return self._state

    @property
    def item(self) -> T:
        return self._item

    @property
    def transitions(self) -> tuple[Transition[T], ...]:
        return self._transitions

    def handle_event(self, event: Event) -> None:
        """Apply the first transition matching the current state and ``event``.

        Raises TransitionError if nothing matches; the state is unchanged
        and no hooks run. An exception from ``before`` propagates as-is and
        leaves the state unchanged. The new state is committed before
        ``after`` runs, so an exception from ``after`` propagates with the
        transition already applied.
        """
        current = self._state
        for t in self._transitions:
            if not t.matches(current, event):
                continue

            if t.before is not None:
                try:
                    t.before(self._item)
                except Exception:
                    logger.debug("before hook failed: %s -> %s on %s", current, t.to_state, event)
                    raise

            self._state = t.to_state
            logger.debug("transition %s -> %s on %s", current, t.to_state, event)

            if t.after is not None:
                try:
                    t.after(self._item)
                except Exception:
                    logger.debug("after hook failed: %s -> %s on %s", current, t.to_state, event)
                    raise
            return

        logger.debug("no transition from %s on %s", current, event)
        raise TransitionError(current, event)

    def __repr__(self) -> str:
        return f"FSM(state={self._state!r}, transitions={len(self._transitions)})"
