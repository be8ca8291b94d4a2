# levels.py - Level Catalog
"""
Built-in levels, in the order they are played.
Coordinates use the 80x60 authoring space (top left is (0, 0)).
"""

from level import Level, Rectangle


def _rect(x: float, y: float, w: float, h: float) -> Rectangle:
    return Rectangle(top_left=(x, y), size=(w, h))


# Outer frame shared by most levels
LEFT_WALL = _rect(0.0, 0.0, 5.0, 60.0)
RIGHT_WALL = _rect(75.0, 0.0, 5.0, 60.0)
BOTTOM_WALL = _rect(0.0, 55.0, 80.0, 5.0)
TOP_WALL = _rect(0.0, 0.0, 80.0, 3.0)

CENTER_PAD = _rect(37.0, 54.5, 6.0, 0.5)


FIRST_FLIGHT = Level(
    name="first flight",
    walls=(LEFT_WALL, RIGHT_WALL, BOTTOM_WALL, TOP_WALL),
    pad=CENTER_PAD,
    goals=((40.0, 35.0), (60.0, 40.0)),
)

SIMPLE = Level(
    name="simple",
    walls=(LEFT_WALL, RIGHT_WALL, BOTTOM_WALL),
    pad=CENTER_PAD,
    goals=(
        (40.0, 8.0),
        (10.0, 16.0),
        (15.0, 50.0),
        (20.0, 20.0),
        (40.0, 40.0),
        (45.0, 45.0),
        (50.0, 40.0),
        (40.0, 30.0),
        (20.0, 10.0),
        (20.0, 20.0),
    ),
)

CHIMNEY = Level(
    name="chimney",
    walls=(
        LEFT_WALL,
        RIGHT_WALL,
        BOTTOM_WALL,
        TOP_WALL,
        _rect(25.0, 15.0, 4.0, 40.0),  # left column
        _rect(51.0, 15.0, 4.0, 40.0),  # right column
        _rect(29.0, 15.0, 8.0, 3.0),  # left lip
        _rect(43.0, 15.0, 8.0, 3.0),  # right lip
    ),
    pad=CENTER_PAD,
    goals=((40.0, 8.0), (15.0, 40.0), (65.0, 40.0), (40.0, 30.0)),
)

ZIG_ZAG = Level(
    name="zig zag",
    walls=(
        LEFT_WALL,
        RIGHT_WALL,
        BOTTOM_WALL,
        TOP_WALL,
        _rect(5.0, 42.0, 50.0, 3.0),
        _rect(25.0, 28.0, 50.0, 3.0),
        _rect(5.0, 14.0, 50.0, 3.0),
    ),
    pad=_rect(60.0, 54.5, 6.0, 0.5),
    goals=((15.0, 50.0), (65.0, 36.0), (15.0, 22.0), (65.0, 8.0)),
)

LEVELS: list[Level] = [FIRST_FLIGHT, SIMPLE, CHIMNEY, ZIG_ZAG]
