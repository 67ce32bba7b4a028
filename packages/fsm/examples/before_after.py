"""Light switch with before/after hooks.

Demonstrates:
- A before hook that prepares the item (registers it in a fake database)
- An after hook that persists the item once the new state is active

Run: python -m examples.before_after
"""
from __future__ import annotations

from fsm import FSM, Transition

from examples.simple import LightSwitch


def build(switch: LightSwitch, db: dict[str, LightSwitch]) -> FSM[LightSwitch]:
    def register(ls: LightSwitch) -> None:
        db.setdefault(ls.name, ls)

    def save(ls: LightSwitch) -> None:
        db[ls.name] = ls

    return FSM(
        "off",
        switch,
        Transition("off", "flip_switch", "on", before=register, after=save),
        Transition("on", "flip_switch", "off", before=register, after=save),
    )


def main() -> None:
    db: dict[str, LightSwitch] = {}
    switch = LightSwitch(state="off", name="living room")
    machine = build(switch, db)

    machine.handle_event("flip_switch")

    print(machine.state, switch.state)
    print(db)


if __name__ == "__main__":
    main()
