"""Grid traversal of a single ray until it meets a wall."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .geometry import Vec2


@dataclass(frozen=True)
class Ray:
    """The outcome of casting one ray through the map."""

    direction: Vec2
    map_x: int
    map_y: int
    pos: Vec2
    step: Vec2
    side: int
    delta: Vec2
    side_dist: Vec2
    hit: Vec2
    distance: float


def _is_floor(grid: Sequence[Sequence[str]], x: int, y: int) -> bool:
    if y < 0 or y >= len(grid):
        return False
    row = grid[y]
    if x < 0 or x >= len(row):
        return False
    return row[x] == "0"


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def cast_ray(angle: float, x: float, y: float, grid: Sequence[Sequence[str]]) -> Ray:
    """Cast a ray from ``(x, y)`` at ``angle`` and stop at the first non-floor cell.

    Cells outside the grid count as walls.
    """
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    map_x = int(x)
    map_y = int(y)
    delta_x = _inverse_abs(dir_x)
    delta_y = _inverse_abs(dir_y)

    if dir_x >= 0:
        step_x = 1
        side_x = (map_x + 1 - x) * delta_x
    else:
        step_x = -1
        side_x = (x - map_x) * delta_x
    if dir_y >= 0:
        step_y = 1
        side_y = (map_y + 1 - y) * delta_y
    else:
        step_y = -1
        side_y = (y - map_y) * delta_y

    side = 0
    while _is_floor(grid, map_x, map_y):
        if side_x < side_y:
            side = 0
            side_x += delta_x
            map_x += step_x
        else:
            side = 1
            side_y += delta_y
            map_y += step_y

    if side == 0:
        distance = (map_x - x + (1 - step_x) / 2) / dir_x
        hit = Vec2(float(map_x), y + distance * dir_y)
    else:
        distance = (map_y - y + (1 - step_y) / 2) / dir_y
        hit = Vec2(x + distance * dir_x, float(map_y))

    return Ray(
        direction=Vec2(dir_x, dir_y),
        map_x=map_x,
        map_y=map_y,
        pos=Vec2(x, y),
        step=Vec2(float(step_x), float(step_y)),
        side=side,
        delta=Vec2(delta_x, delta_y),
        side_dist=Vec2(side_x, side_y),
        hit=hit,
        distance=distance,
    )