# moonracer.py - Core Game Mechanics
"""
The run state machine and the per-tick systems it drives.

    WAITING --load_level--> SPAWNING --liftoff--> FLYING --pad--> COMPLETED
                               ^                    |                |
                               +------restart-------+----------------+

Every tick goes through MoonRacer.tick(), which runs the systems in a fixed
order (input, move ship, goals). Entering SPAWNING updates the ghost from the
run being left, then rebuilds the level, in a single call.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from collision import collide
from config import GOAL_SIZE
from controls import ThrusterMonitor
from events import GoalReached, LevelCompleted, Liftoff, NewHighscore
from ghost import Ghost, compute_ghost, ghost_position, should_replace
from highscore import HighscoreTable
from level import Level, Screen, Vec2, Vec3, WallBox, initial_ship_pos, level_walls
from run_context import OFFSCREEN_POS, RunContext
from ship import SHIP_BOX, ShipState, step

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    WAITING = "waiting"
    SPAWNING = "spawning"
    FLYING = "flying"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TickInput:
    """What the input collaborator hands over once per tick."""

    thrust: Vec2 = (0.0, 0.0)
    restart: bool = False
    pause: bool = False


@dataclass
class TickResult:
    """Snapshot of the run after a tick, for the render and audio collaborators."""

    status: GameStatus
    paused: bool
    score: int
    frame_count: int
    ship_position: Vec3
    ship_velocity: Vec2
    ghost_position: Vec3
    goal_marker: Vec3
    pad_armed: bool
    text: str
    events: list = field(default_factory=list)


# ------------------------------------------------------------------ #
# SYSTEMS
# ------------------------------------------------------------------ #
def goal_reached(goal: Vec2, ship: Vec2) -> bool:
    """Both axis distances within the goal size."""
    return abs(goal[0] - ship[0]) <= GOAL_SIZE and abs(goal[1] - ship[1]) <= GOAL_SIZE


def setup_level(ctx: RunContext, level: Level, screen: Screen) -> None:
    """Reset the run and lay out the level geometry in screen space."""
    logger.info("Level setup: %s", level.name)
    ctx.walls = level_walls(level, screen)

    ctx.thrust = (0.0, 0.0)
    ctx.score = 0  # Index of the next goal
    ctx.frame_count = 0  # Ticks since liftoff
    ctx.made_highscore = False
    ctx.thrust_history.clear()

    ctx.goals = [screen.goal_pos(goal) for goal in level.goals]
    pad_pos, pad_size = screen.center_pos(level.pad)
    ctx.launch_pad = WallBox.from_center_size(pad_pos, pad_size)

    if ctx.goals:
        ctx.goal_marker = (ctx.goals[0][0], ctx.goals[0][1], 0.0)
        ctx.pad_armed = False
    else:
        # Nothing to collect, straight back to the pad
        ctx.goal_marker = OFFSCREEN_POS
        ctx.pad_armed = True

    ctx.spawn_pos = initial_ship_pos(level, screen)
    ctx.ship = ShipState(ctx.spawn_pos)  # At rest on the pad
    ctx.ghost_position = OFFSCREEN_POS  # Hidden until liftoff


def update_ghost(ctx: RunContext, level: Level, screen: Screen) -> None:
    """Replace the ghost with the run being left, if it is an improvement."""
    if not ctx.thrust_history:
        # Respawn before liftoff, there is no trajectory to keep
        return
    prev = ctx.ghost
    if prev is not None:
        logger.info(
            "Prev score/frame %d/%d  current %d/%d",
            prev.score, prev.frame_count, ctx.score, ctx.frame_count,
        )
    if not should_replace(prev, ctx.score, ctx.frame_count):
        logger.info("Ignored ghost")
        return

    positions = compute_ghost(
        initial_ship_pos(level, screen),
        ctx.thrust_history,
        level_walls(level, screen),
    )
    logger.info("Saving new ghost!")
    ctx.ghost = Ghost(score=ctx.score, frame_count=ctx.frame_count, positions=positions)


def move_ship(ctx: RunContext) -> None:
    """Integrate the live ship, place the ghost, record the tick."""
    step(ctx.ship, ctx.thrust, ctx.walls)

    pos = ghost_position(ctx.ghost, ctx.frame_count)
    ctx.ghost_position = pos if pos is not None else OFFSCREEN_POS

    ctx.frame_count += 1
    ctx.thrust_history.append(ctx.thrust)


def check_highscore(ctx: RunContext) -> list:
    level = ctx.current_level
    previous = ctx.highscores.best(level)
    if not ctx.highscores.record(level, ctx.frame_count):
        return []
    ctx.made_highscore = previous is not None
    logger.info("New highscore for level %d: %d frames", level, ctx.frame_count)
    return [NewHighscore(level=level, frame_count=ctx.frame_count)]


def check_goal(ctx: RunContext) -> tuple[list, bool]:
    """
    Evaluate the goal sequence after the ship moved.

    Returns:
        tuple: (events, True if the ship landed back on the pad).
    """
    ship_pos = ctx.ship.position

    if ctx.score >= len(ctx.goals):
        # Check if back on the landing pad
        pad = ctx.launch_pad
        if collide(ship_pos, SHIP_BOX, pad.center, pad.size) is not None:
            return check_highscore(ctx), True
        return [], False

    if not goal_reached(ctx.goals[ctx.score], (ship_pos[0], ship_pos[1])):
        return [], False

    logger.info("Reached goal! %d", ctx.score)
    ctx.score += 1
    last = ctx.score >= len(ctx.goals)
    if last:
        ctx.goal_marker = OFFSCREEN_POS
        ctx.pad_armed = True
    else:
        next_goal = ctx.goals[ctx.score]
        ctx.goal_marker = (next_goal[0], next_goal[1], 0.0)
    return [GoalReached(level=ctx.current_level, score=ctx.score, last=last)], False


def resume_level(highscores: HighscoreTable, level_count: int) -> int:
    """Level to continue from: the first one without a highscore."""
    return max(0, min(len(highscores), level_count - 1))


# ------------------------------------------------------------------ #
# STATE MACHINE
# ------------------------------------------------------------------ #
class MoonRacer:
    """Explicit state machine driving one run at a time."""

    def __init__(
        self,
        levels: Sequence[Level],
        highscores: HighscoreTable | None = None,
        screen: Screen | None = None,
    ) -> None:
        self.levels = list(levels)  # Level catalog, indexed by current_level
        self.screen = screen or Screen()  # Level space -> screen space projection
        self.ctx = RunContext(
            highscores=highscores if highscores is not None else HighscoreTable()
        )
        self.ctx.current_level = resume_level(self.ctx.highscores, len(self.levels))
        self.status = GameStatus.WAITING  # Nothing loaded until a menu pick
        self.paused = False  # Orthogonal to status
        self.thruster = ThrusterMonitor()  # Edge detection for the engine sound
        self._events: list = []  # emitted since the last tick result

    # --------- Queries --------- #
    @property
    def level(self) -> Level:
        return self.levels[self.ctx.current_level]

    @property
    def has_remaining_level(self) -> bool:
        return self.ctx.current_level + 1 < len(self.levels)

    def status_text(self) -> str:
        if self.status is GameStatus.COMPLETED:
            return f"GG! {self.ctx.elapsed()} (press 'r' to try again)"
        if self.status is GameStatus.WAITING:
            return ""
        return f"Flying: {self.ctx.score} {self.ctx.elapsed()}"

    def final_text(self) -> str:
        return f"GG, you finished moonracer in {self.ctx.highscores.total_seconds():.3f}!"

    # --------- Actions --------- #
    def load_level(self, index: int) -> None:
        """Select a level; the run starts over with no ghost."""
        if not 0 <= index < len(self.levels):
            raise IndexError(f"level {index} out of range (0..{len(self.levels) - 1})")
        logger.info("Loading level %d", index)
        ctx = self.ctx
        ctx.current_level = index
        ctx.ghost = None  # Ghosts never carry over between levels
        ctx.thrust_history.clear()  # Nothing flown yet, no ghost candidate
        ctx.score = 0
        ctx.frame_count = 0
        ctx.made_highscore = False
        self.paused = False
        self._set_status(GameStatus.SPAWNING)

    def restart(self) -> None:
        """Respawn on the current level, keeping the run as ghost candidate."""
        if self.status is GameStatus.WAITING:
            return
        self.paused = False
        self._set_status(GameStatus.SPAWNING)

    def next_level(self) -> None:
        self.load_level(self.ctx.current_level + 1)

    def quit_to_menu(self) -> None:
        """Leave the level; the next load_level starts from scratch."""
        self.paused = False
        self._set_status(GameStatus.WAITING)

    def toggle_pause(self) -> bool:
        """Freeze or resume tick delivery. Returns the new paused state."""
        if self.status is GameStatus.WAITING:
            return False
        self.paused = not self.paused
        if self.paused:
            self._stop_thruster()
        return self.paused

    def tick(self, tick_input: TickInput) -> TickResult:
        """Run one fixed tick."""
        if tick_input.restart and self.status is not GameStatus.WAITING:
            self.restart()
            return self._result()

        if tick_input.pause:
            self.toggle_pause()

        if self.paused or self.status in (GameStatus.WAITING, GameStatus.COMPLETED):
            return self._result()

        ctx = self.ctx
        ctx.thrust = tick_input.thrust
        thruster_event = self.thruster.update(ctx.thrust)
        if thruster_event is not None:
            self._events.append(thruster_event)

        if self.status is GameStatus.SPAWNING:
            if ctx.thrust != (0.0, 0.0):
                self._set_status(GameStatus.FLYING)  # Liftoff tick does not integrate
            return self._result()

        move_ship(ctx)  # Integrate, then evaluate goals on the new position
        events, landed = check_goal(ctx)
        self._events.extend(events)
        if landed:
            self._set_status(GameStatus.COMPLETED)
        return self._result()

    # --------- Transitions --------- #
    def _set_status(self, status: GameStatus) -> None:
        exit_hook = getattr(self, f"on_exit_{self.status.value}", None)
        if exit_hook is not None:
            exit_hook()
        self.status = status
        enter_hook = getattr(self, f"on_enter_{status.value}", None)
        if enter_hook is not None:
            enter_hook()

    def on_enter_waiting(self) -> None:
        self._stop_thruster()

    def on_enter_spawning(self) -> None:
        update_ghost(self.ctx, self.level, self.screen)
        setup_level(self.ctx, self.level, self.screen)
        self._stop_thruster()

    def on_enter_flying(self) -> None:
        logger.info("Lift off!")
        self.ctx.frame_count = 0
        self._events.append(Liftoff(level=self.ctx.current_level))

    def on_exit_flying(self) -> None:
        self._stop_thruster()

    def on_enter_completed(self) -> None:
        ctx = self.ctx
        ctx.ship = ShipState(OFFSCREEN_POS)
        ctx.ghost_position = OFFSCREEN_POS
        self._events.append(
            LevelCompleted(
                level=ctx.current_level,
                frame_count=ctx.frame_count,
                made_highscore=ctx.made_highscore,
            )
        )

    def _stop_thruster(self) -> None:
        event = self.thruster.reset()
        if event is not None:
            self._events.append(event)

    def _result(self) -> TickResult:
        ctx = self.ctx
        events, self._events = self._events, []
        return TickResult(
            status=self.status,
            paused=self.paused,
            score=ctx.score,
            frame_count=ctx.frame_count,
            ship_position=ctx.ship.position,
            ship_velocity=ctx.ship.velocity,
            ghost_position=ctx.ghost_position,
            goal_marker=ctx.goal_marker,
            pad_armed=ctx.pad_armed,
            text=self.status_text(),
            events=events,
        )
