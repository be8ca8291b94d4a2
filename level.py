# level.py - Level Geometry
"""
Level structure and its projection from authoring space to screen space.

Levels are drawn in a 80x60 space with the origin at the top left and y going
down. The simulation runs in screen space: centered on (0, 0), y going up,
SCREEN_DIM wide. Nothing here holds state, everything is computed from the
read-only Level data.
"""

from dataclasses import dataclass, field

from config import LEVEL_SIZE, SCREEN_DIM, SHIP_RADIUS

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in level authoring space."""

    top_left: Vec2
    size: Vec2

    def bottom_uv(self) -> Vec2:
        """Bottom left corner, normalized by the level size."""
        return (
            self.top_left[0] / LEVEL_SIZE[0],
            (self.top_left[1] + self.size[1]) / LEVEL_SIZE[1],
        )

    def size_uv(self) -> Vec2:
        return (self.size[0] / LEVEL_SIZE[0], self.size[1] / LEVEL_SIZE[1])


@dataclass(frozen=True)
class Level:
    """One level: ordered goals, a launch pad and the walls around them."""

    name: str
    walls: tuple[Rectangle, ...]
    pad: Rectangle
    goals: tuple[Vec2, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class WallBox:
    """Static axis-aligned box in screen space."""

    center: Vec3
    half_size: Vec2

    @classmethod
    def from_center_size(cls, center: Vec2, size: Vec2) -> "WallBox":
        return cls((center[0], center[1], 0.0), (size[0] / 2.0, size[1] / 2.0))

    @property
    def size(self) -> Vec2:
        return (self.half_size[0] * 2.0, self.half_size[1] * 2.0)

    @property
    def top(self) -> float:
        return self.center[1] + self.half_size[1]

    @property
    def bottom(self) -> float:
        return self.center[1] - self.half_size[1]

    @property
    def left(self) -> float:
        return self.center[0] - self.half_size[0]

    @property
    def right(self) -> float:
        return self.center[0] + self.half_size[0]


class Screen:
    """Pure projection from level authoring space to screen space."""

    def __init__(self, dim: Vec2 = SCREEN_DIM) -> None:
        self.dim = dim
        self.center = (dim[0] / 2.0, dim[1] / 2.0)

    def center_pos(self, rec: Rectangle) -> tuple[Vec2, Vec2]:
        """Return the (center, size) of a rectangle in screen space."""
        u, v = rec.bottom_uv()
        x = u * self.dim[0] - self.center[0]
        y = -(v * self.dim[1] - self.center[1])  # flip y axis

        su, sv = rec.size_uv()
        size = (su * self.dim[0], sv * self.dim[1])
        return (x + size[0] / 2.0, y + size[1] / 2.0), size

    def goal_pos(self, goal: Vec2) -> Vec2:
        x = goal[0] / LEVEL_SIZE[0] * self.dim[0] - self.center[0]
        y = -(goal[1] / LEVEL_SIZE[1] * self.dim[1] - self.center[1])
        return (x, y)

    def wall_box(self, rec: Rectangle) -> WallBox:
        center, size = self.center_pos(rec)
        return WallBox.from_center_size(center, size)


def level_walls(level: Level, screen: Screen) -> list[WallBox]:
    """Wall boxes in registration order (the order collisions are resolved)."""
    return [screen.wall_box(wall) for wall in level.walls]


def initial_ship_pos(level: Level, screen: Screen) -> Vec3:
    """Spawn position: the ship rests with its bottom on the pad bottom edge."""
    (pad_x, pad_y), (_, pad_h) = screen.center_pos(level.pad)
    return (pad_x, pad_y - pad_h / 2.0 + SHIP_RADIUS, 0.0)
