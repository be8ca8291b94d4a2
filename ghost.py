# ghost.py - Ghost Recording and Replay
"""
The ghost is the trajectory of the best run flown on the current level.

Only the thrust inputs of a run are recorded; the trajectory is rebuilt by
replaying them through the ship integrator from the spawn position.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from level import Vec2, Vec3, WallBox
from ship import simulate_ship


@dataclass(frozen=True)
class Ghost:
    score: int
    frame_count: int
    positions: tuple[Vec3, ...]


def should_replace(ghost: Ghost | None, score: int, frame_count: int) -> bool:
    """
    True when a finished run improves on the stored ghost.

    Higher score wins; on equal score the run must be strictly faster.
    """
    if ghost is None:
        return True
    if ghost.score > score:
        return False
    if ghost.score == score and ghost.frame_count <= frame_count:
        return False
    return True


def compute_ghost(
    initial_pos: Vec3,
    thrust_history: Iterable[Vec2],
    walls: Sequence[WallBox],
) -> tuple[Vec3, ...]:
    """Replay a thrust history, one position per tick."""
    positions: list[Vec3] = []
    velocity: Vec2 = (0.0, 0.0)
    pos = initial_pos
    for thrust in thrust_history:
        velocity, pos = simulate_ship(thrust, velocity, pos, walls)
        positions.append(pos)
    return tuple(positions)


def ghost_position(ghost: Ghost | None, tick: int) -> Vec3 | None:
    """Position of the ghost at a tick, None when it has nothing to show."""
    if ghost is None or not 0 <= tick < len(ghost.positions):
        return None
    return ghost.positions[tick]
