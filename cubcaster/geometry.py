"""Angles and two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

TWO_PI = 6.283185307179586232


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float
    y: float

    def rotate(self, angle: float) -> Vec2:
        """Return this vector rotated by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vec2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def normalized(self) -> Vec2:
        """Return the unit vector with the same direction."""
        magnitude = math.sqrt(self.x * self.x + self.y * self.y)
        return Vec2(self.x / magnitude, self.y / magnitude)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def normalize_angle(angle: float) -> float:
    """Wrap an angle into the range [0, 2*pi)."""
    angle = math.fmod(angle, TWO_PI)
    if angle < 0:
        angle += TWO_PI
    return angle