# collision.py - Axis-Aligned Box Collisions
"""
Overlap classification between a moving box and static wall boxes, and the
single-axis correction applied to the ship when it hits one.
"""

import math
from enum import Enum
from typing import Iterable

from level import Vec2, Vec3, WallBox


class Collision(Enum):
    """Side of the static box that was hit by the moving box."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


def collide(a_pos: Vec3, a_size: Vec2, b_pos: Vec3, b_size: Vec2) -> Collision | None:
    """
    Check whether box `a` overlaps box `b`.

    Returns None when they don't touch, otherwise the side of `b` that `a`
    crosses. When `a` crosses faces on both axes, the one with the smallest
    penetration wins (x on ties). A box that does not straddle any face on an
    axis is INSIDE along that axis.
    """
    a_min_x = a_pos[0] - a_size[0] / 2.0
    a_max_x = a_pos[0] + a_size[0] / 2.0
    a_min_y = a_pos[1] - a_size[1] / 2.0
    a_max_y = a_pos[1] + a_size[1] / 2.0
    b_min_x = b_pos[0] - b_size[0] / 2.0
    b_max_x = b_pos[0] + b_size[0] / 2.0
    b_min_y = b_pos[1] - b_size[1] / 2.0
    b_max_y = b_pos[1] + b_size[1] / 2.0

    # Strict comparisons: boxes sharing a face do not touch
    if not (a_min_x < b_max_x and a_max_x > b_min_x and a_min_y < b_max_y and a_max_y > b_min_y):
        return None

    # Left or right face
    if a_min_x < b_min_x and a_max_x > b_min_x and a_max_x < b_max_x:
        x_collision, x_depth = Collision.LEFT, b_min_x - a_max_x
    elif a_min_x > b_min_x and a_min_x < b_max_x and a_max_x > b_max_x:
        x_collision, x_depth = Collision.RIGHT, a_min_x - b_max_x
    else:
        x_collision, x_depth = Collision.INSIDE, -math.inf  # Never the shallower axis

    # Top or bottom face
    if a_min_y < b_min_y and a_max_y > b_min_y and a_max_y < b_max_y:
        y_collision, y_depth = Collision.BOTTOM, b_min_y - a_max_y
    elif a_min_y > b_min_y and a_min_y < b_max_y and a_max_y > b_max_y:
        y_collision, y_depth = Collision.TOP, a_min_y - b_max_y
    else:
        y_collision, y_depth = Collision.INSIDE, -math.inf  # Never the shallower axis

    if abs(y_depth) < abs(x_depth):  # x wins ties
        return y_collision
    return x_collision


def resolve(
    position: Vec3,
    velocity: Vec2,
    half_size: Vec2,
    walls: Iterable[WallBox],
) -> tuple[Vec2, Vec3]:
    """
    Push the box out of every wall it overlaps, in wall order.

    Each hit wall corrects one axis: the velocity component along that axis is
    zeroed and the position is clamped against the face. Later walls are
    tested against the already corrected position and win on the axis they
    touch.
    """
    x, y, z = position
    vx, vy = velocity
    size = (half_size[0] * 2.0, half_size[1] * 2.0)  # Full box for collide()

    for wall in walls:
        collision = collide((x, y, z), size, wall.center, wall.size)
        if collision is None:
            continue
        if collision is Collision.LEFT:
            vx = 0.0
            x = wall.left - half_size[0]  # Flush with the left face
        elif collision is Collision.RIGHT:
            vx = 0.0
            x = wall.right + half_size[0]  # Flush with the right face
        elif collision is Collision.TOP:
            vy = 0.0
            y = wall.top + half_size[1]  # Resting on top
        elif collision is Collision.BOTTOM:
            vy = 0.0
            y = wall.bottom - half_size[1]  # Flush under the bottom face
        # INSIDE: nothing to push against

    return (vx, vy), (x, y, z)
