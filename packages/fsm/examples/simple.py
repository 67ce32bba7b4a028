"""Light switch -- the simplest possible state machine.

Demonstrates:
- Declaring states, events and transitions
- Dispatching an event with handle_event
- The machine's state is not copied onto the item automatically

Run: python -m examples.simple
"""
from __future__ import annotations

from dataclasses import dataclass

from fsm import FSM, State, Transition


@dataclass
class LightSwitch:
    state: str
    name: str

    def set_state(self, state: State) -> None:
        self.state = state


def build(switch: LightSwitch) -> FSM[LightSwitch]:
    return FSM(
        "off",
        switch,
        Transition("off", "flip_switch", "on"),
        Transition("on", "flip_switch", "off"),
    )


def main() -> None:
    switch = LightSwitch(state="off", name="living room")
    machine = build(switch)

    machine.handle_event("flip_switch")

    # Machine says "on", the item still says "off": nothing synced it.
    print(machine.state, switch.state)


if __name__ == "__main__":
    main()
