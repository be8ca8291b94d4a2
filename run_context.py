# run_context.py - Run State
"""
All the mutable state of a run, owned by the tick loop and passed explicitly to
every system. Other collaborators only read it between ticks.
"""

from dataclasses import dataclass, field

from config import FREQ, OFFSCREEN
from ghost import Ghost
from highscore import HighscoreTable
from level import Vec2, Vec3, WallBox
from ship import ShipState

OFFSCREEN_POS: Vec3 = (OFFSCREEN[0], OFFSCREEN[1], 0.0)


@dataclass
class RunContext:
    # Input and progress
    thrust: Vec2 = (0.0, 0.0)
    frame_count: int = 0
    score: int = 0
    thrust_history: list[Vec2] = field(default_factory=list)
    made_highscore: bool = False
    current_level: int = 0

    # Level data in screen space, rebuilt on each spawn
    goals: list[Vec2] = field(default_factory=list)
    walls: list[WallBox] = field(default_factory=list)
    launch_pad: WallBox = WallBox((0.0, 0.0, 0.0), (0.0, 0.0))
    spawn_pos: Vec3 = (0.0, 0.0, 0.0)
    goal_marker: Vec3 = OFFSCREEN_POS
    pad_armed: bool = False

    # Ships
    ship: ShipState = field(default_factory=lambda: ShipState(OFFSCREEN_POS))
    ghost: Ghost | None = None
    ghost_position: Vec3 = OFFSCREEN_POS

    highscores: HighscoreTable = field(default_factory=HighscoreTable)

    def elapsed_sec(self) -> float:
        return self.frame_count * FREQ

    def elapsed(self) -> str:
        return f"{self.elapsed_sec():.3f} sec"
