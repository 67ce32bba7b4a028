"""fsm - A minimal, generic finite state machine."""
from __future__ import annotations

import logging

from fsm.machine import FSM
from fsm.transition import Transition
from fsm.types import Event, Hook, State, Stateful, TransitionError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FSM",
    "Transition",
    "State",
    "Event",
    "Hook",
    "Stateful",
    "TransitionError",
]
