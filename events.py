# events.py - Core Events
"""
Facts emitted by the simulation during a tick.
Consumed by the audio player, the save collaborator and the UI; the core never
reads them back.
"""

from dataclasses import dataclass
from enum import Enum


class Thruster(Enum):
    """Edge-triggered thruster transitions."""

    FIRING = "firing"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Liftoff:
    level: int


@dataclass(frozen=True)
class GoalReached:
    level: int
    score: int
    last: bool


@dataclass(frozen=True)
class NewHighscore:
    """A level was finished strictly faster than any stored run."""

    level: int
    frame_count: int


@dataclass(frozen=True)
class LevelCompleted:
    level: int
    frame_count: int
    made_highscore: bool
