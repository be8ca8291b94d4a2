import pytest

from level import Level, Rectangle, Screen
from moonracer import MoonRacer, TickInput

FLOOR = Rectangle(top_left=(0.0, 55.0), size=(80.0, 5.0))
PAD = Rectangle(top_left=(37.0, 54.5), size=(6.0, 0.5))

UP = (0.0, 1.0)
DOWN = (0.0, -1.0)


@pytest.fixture
def screen():
    return Screen()


@pytest.fixture
def goal_level():
    """One goal straight above the pad, a floor and nothing else."""
    return Level(name="hop", walls=(FLOOR,), pad=PAD, goals=((40.0, 50.0),))


@pytest.fixture
def empty_level():
    return Level(name="empty", walls=(FLOOR,), pad=PAD, goals=())


@pytest.fixture
def racer(goal_level, empty_level):
    return MoonRacer([goal_level, empty_level])


def fly(racer, thrust, until, max_ticks=500):
    """Tick with a constant thrust until a result matches."""
    results = []
    for _ in range(max_ticks):
        result = racer.tick(TickInput(thrust=thrust))
        results.append(result)
        if until(result):
            return results
    raise AssertionError(f"condition not reached after {max_ticks} ticks")


def hop(racer, wait_ticks=0):
    """Lift off, touch the goal, land back on the pad."""
    results = []
    if wait_ticks:
        # Push against the floor before going up
        results += fly(racer, DOWN, lambda r: True)
        for _ in range(wait_ticks):
            results.append(racer.tick(TickInput(thrust=DOWN)))
    results += fly(racer, UP, lambda r: r.score == 1)
    results += fly(racer, DOWN, lambda r: r.status.value == "completed")
    return results
