"""The player: placement on the map, turning and collision-checked movement."""

from __future__ import annotations

import enum
import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field

from .errors import ERR_NO_PLAYER, Cub3dError
from .geometry import deg_to_rad, normalize_angle

PLAYER_CHARS = "NSEW"


class Direction(enum.Enum):
    """A direction of movement or turning."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


def _is_floor(grid: Sequence[Sequence[str]], x: int, y: int) -> bool:
    if y < 0 or y >= len(grid):
        return False
    row = grid[y]
    if x < 0 or x >= len(row):
        return False
    return row[x] == "0"


@dataclass
class Player:
    """Position, heading and movement parameters of the player."""

    x: float
    y: float
    angle: float
    fov: float = field(default_factory=lambda: deg_to_rad(60))
    radius: float = 5.0
    turn_speed: float = field(default_factory=lambda: deg_to_rad(5))
    movement_speed: float = 0.1
    half_fov: float = field(init=False)

    def __post_init__(self) -> None:
        self.half_fov = self.fov / 2.0

    def turn(self, direction: Direction) -> None:
        """Turn anticlockwise for LEFT, clockwise for anything else."""
        sign = -1 if direction is Direction.LEFT else 1
        self.angle = normalize_angle(self.angle + self.turn_speed * sign)

    def _step(self, grid: Sequence[Sequence[str]], dx: float, dy: float) -> None:
        new_x = self.x + dx
        new_y = self.y + dy
        check_x = int(math.floor(new_x + dx * self.radius))
        check_y = int(math.floor(new_y + dy * self.radius))
        if _is_floor(grid, int(self.x), check_y):
            self.y = new_y
        if _is_floor(grid, check_x, int(self.y)):
            self.x = new_x

    def move_forward_backward(self, grid: Sequence[Sequence[str]], direction: Direction) -> None:
        """Move along the heading, backwards for BACKWARD, stopping at walls."""
        sign = -1 if direction is Direction.BACKWARD else 1
        dx = math.cos(self.angle) * self.movement_speed * sign
        dy = math.sin(self.angle) * self.movement_speed * sign
        self._step(grid, dx, dy)

    def move_right_left(self, grid: Sequence[Sequence[str]], direction: Direction) -> None:
        """Strafe sideways, to the right for RIGHT and left otherwise, stopping at walls."""
        sign = -1 if direction is Direction.RIGHT else 1
        angle = normalize_angle(self.angle + math.pi / 2 * sign)
        dx = -math.cos(angle) * self.movement_speed
        dy = -math.sin(angle) * self.movement_speed
        self._step(grid, dx, dy)


def player_angle(c: str) -> float:
    """Return the starting heading for a player map character."""
    if c in ("N", "S", "E"):
        return (3 * (c == "N") + 2 * (c == "S")) * (math.pi / 2)
    if c == "W":
        return math.pi
    raise Cub3dError(ERR_NO_PLAYER)


def init_player(grid: Sequence[MutableSequence[str]]) -> Player:
    """Find the first player character, replace it with floor and return the player."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell and cell in PLAYER_CHARS:
                angle = player_angle(cell)
                row[x] = "0"
                return Player(x=x + 0.5, y=y + 0.5, angle=angle)
    raise Cub3dError(ERR_NO_PLAYER)