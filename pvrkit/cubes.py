"""Simulation state for a field of bouncing, spinning cubes."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

MAX_CUBES = 350
DT = 1.0 / 60.0
BOUND = 3.0

COLORS: tuple[tuple[int, int, int, int], ...] = (
    (255, 0, 0, 128),
    (0, 255, 0, 128),
    (0, 0, 255, 128),
    (255, 255, 0, 128),
    (255, 0, 255, 128),
    (0, 255, 255, 128),
)


def random_between(rng: random.Random, low: float, high: float) -> float:
    """Return a random value between *low* and *high*."""
    return (high - low) * rng.random() + low


def scale_factors(count: int = MAX_CUBES) -> list[float]:
    """Return a growing scale factor per cube, from 0.05 up towards 0.4."""
    if count <= 0:
        raise ValueError("count must be positive")
    step = 0.35 / count
    return [0.05 + i * step for i in range(count)]


def face_colors() -> list[tuple[int, int, int, int]]:
    """Return the per-vertex RGBA colours of a cube, one colour per face."""
    return [color for color in COLORS for _ in range(4)]


@dataclass
class Cube:
    """A cube's size, position and velocity."""

    r: float
    x: float
    y: float
    z: float
    vx: float
    vy: float
    vz: float


class CubeField:
    """A bounded collection of cubes that bounce inside a box."""

    def __init__(self, capacity: int = MAX_CUBES) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.cubes: list[Cube] = []

    def __len__(self) -> int:
        return len(self.cubes)

    def __iter__(self) -> Iterator[Cube]:
        return iter(self.cubes)

    def add(self, r: float, x: float, y: float, z: float,
            vx: float, vy: float, vz: float) -> bool:
        """Add a cube if there is room; return whether it was added."""
        if len(self.cubes) >= self.capacity:
            return False
        self.cubes.append(Cube(r, x, y, z, vx, vy, vz))
        return True

    def update(self, dt: float = DT) -> None:
        """Move every cube by *dt*, reversing any velocity that left the box."""
        for cube in self.cubes:
            cube.x += cube.vx * dt
            cube.y += cube.vy * dt
            cube.z += cube.vz * dt
            if not -BOUND <= cube.x <= BOUND:
                cube.vx = -cube.vx
            if not -BOUND <= cube.y <= BOUND:
                cube.vy = -cube.vy
            if not -BOUND <= cube.z <= BOUND:
                cube.vz = -cube.vz

    def populate(self, rng: random.Random) -> None:
        """Fill the field to capacity with randomly placed cubes."""
        for _ in range(self.capacity):
            r = random_between(rng, 0.1, 0.5)
            x = random_between(rng, -3.0, 3.0)
            y = random_between(rng, -3.0, 3.0)
            z = random_between(rng, -3.0, 3.0)
            vx = random_between(rng, -2.0, 2.0)
            vy = random_between(rng, -2.0, 2.0)
            vz = random_between(rng, -2.0, 2.0)
            self.add(r, x, y, z, vx, vy, vz)