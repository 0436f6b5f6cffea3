"""Traffic light: a three-state cyclic transition system.

    RED --switch--> GREEN --switch--> YELLOW --switch--> RED

Each state is labeled with exactly its own color.
"""

from __future__ import annotations

from enum import Enum

from transys.core.system import TransitionSystem

SWITCH = "switch"


class Color(str, Enum):
    """Colors of the traffic light, used both as states and propositions."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


_NEXT = {
    Color.RED: Color.GREEN,
    Color.GREEN: Color.YELLOW,
    Color.YELLOW: Color.RED,
}


def traffic_light() -> TransitionSystem[Color, str, Color]:
    """Build the traffic light system starting at RED."""

    def label(color: Color) -> frozenset[Color]:
        return frozenset({color})

    def transitions(color: Color) -> list[tuple[str, Color]]:
        return [(SWITCH, _NEXT[color])]

    return TransitionSystem((Color.RED,), label, transitions)


__all__ = [
    "SWITCH",
    "Color",
    "traffic_light",
]
