# ship.py - Ship Physics
"""
The ship integrator. One call advances the ship by one fixed tick.

Velocity is expressed in distance per tick, so the simulation never depends on
wall-clock time. The live ship and the ghost replay both go through
simulate_ship, which keeps a replayed run identical to the flown one.
"""

from dataclasses import dataclass
from typing import Iterable

from collision import resolve
from config import DAMPING, GRAVITY, SHIP_RADIUS, SHIP_SIZE, THRUST_POWER
from level import Vec2, Vec3, WallBox

SHIP_HALF_SIZE: Vec2 = (SHIP_RADIUS, SHIP_RADIUS)
SHIP_BOX: Vec2 = (SHIP_SIZE, SHIP_SIZE)


@dataclass
class ShipState:
    position: Vec3
    velocity: Vec2 = (0.0, 0.0)


def simulate_ship(
    thrust: Vec2,
    velocity: Vec2,
    position: Vec3,
    walls: Iterable[WallBox],
) -> tuple[Vec2, Vec3]:
    """Return the (velocity, position) of the ship after one tick."""
    vx = DAMPING * (thrust[0] * THRUST_POWER[0] + velocity[0])
    vy = DAMPING * (thrust[1] * THRUST_POWER[1] + velocity[1])

    x = position[0] + GRAVITY[0] + vx
    y = position[1] + GRAVITY[1] + vy
    z = position[2] + GRAVITY[2] + 0.0

    return resolve((x, y, z), (vx, vy), SHIP_HALF_SIZE, walls)


def step(ship: ShipState, thrust: Vec2, walls: Iterable[WallBox]) -> ShipState:
    """Advance a ship state in place and return it."""
    ship.velocity, ship.position = simulate_ship(thrust, ship.velocity, ship.position, walls)
    return ship
