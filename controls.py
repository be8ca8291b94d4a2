# controls.py - Input Mapping
"""
Turns the pressed directions of a frame into a thrust vector, and detects when
the thruster starts or stops firing.
"""

from enum import Enum
from typing import Iterable

from events import Thruster
from level import Vec2


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Action(Enum):
    RESTART = "restart"
    PAUSE = "pause"


# tkinter keysyms (lowercased)
KEY_BINDINGS: dict[str, Direction | Action] = {
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "r": Action.RESTART,
    "p": Action.PAUSE,
    "escape": Action.PAUSE,
}


def thrust_from_directions(pressed: Iterable[Direction]) -> Vec2:
    """
    Map pressed directions to an axis-aligned thrust vector.

    Each component is -1, 0 or 1; diagonals are not normalized. Opposite
    directions held together cancel out.
    """
    held = set(pressed)
    dx = (Direction.RIGHT in held) - (Direction.LEFT in held)
    dy = (Direction.UP in held) - (Direction.DOWN in held)
    return (float(dx), float(dy))


class ThrusterMonitor:
    """Edge detector for the thruster on/off state."""

    def __init__(self) -> None:
        self.firing = False

    def update(self, thrust: Vec2) -> Thruster | None:
        firing = thrust != (0.0, 0.0)
        if firing == self.firing:
            return None
        self.firing = firing
        return Thruster.FIRING if firing else Thruster.STOPPED

    def reset(self) -> Thruster | None:
        """Force the thruster off, reporting STOPPED if it was firing."""
        return self.update((0.0, 0.0))
