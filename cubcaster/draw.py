"""Drawing one screen column: ceiling, textured wall slice and floor."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .image import Image, rgb
from .raycaster import Ray

CEILING_COLOR = rgb(0, 0, 0)
FLOOR_COLOR = rgb(100, 100, 100)


@dataclass
class Textures:
    """The four wall textures."""

    north: Image
    south: Image
    east: Image
    west: Image


def select_texture(textures: Textures, ray: Ray) -> Image:
    """Choose the wall texture for the face a ray hit."""
    if ray.side == 0:
        return textures.west if ray.direction.x > 0 else textures.east
    return textures.north if ray.direction.y > 0 else textures.south


def texture_y(texture: Image, y: int, start: int, wall_height: float) -> int:
    """Return the texture row for screen row ``y`` of a wall slice starting at ``start``."""
    normalized = (y - start) / (2.0 * wall_height)
    return int(math.fmod(normalized * texture.height, texture.height))


def draw_ceiling(image: Image, x: int, wall_height: float) -> None:
    """Fill column ``x`` above the wall slice with the ceiling colour."""
    half_height = image.height // 2
    image.draw_vertical_line(x, 0, int(half_height - wall_height), CEILING_COLOR)


def draw_wall(image: Image, textures: Textures, x: int, wall_height: float, ray: Ray) -> None:
    """Draw the textured wall slice for column ``x``."""
    texture = select_texture(textures, ray)
    tex_x = int(math.fmod(ray.hit.x + ray.hit.y, 1.0) * texture.width)
    tex_x = min(max(tex_x, 0), texture.width - 1)
    start = int(image.height // 2 - wall_height)
    end = int(start + 2.0 * wall_height)
    if end >= image.height:
        end = image.height - 1
    first = max(start, 0)
    if first >= end:
        return
    rows = np.arange(first, end)
    tex_rows = np.fmod(
        (rows - start) / (2.0 * wall_height) * texture.height, texture.height
    ).astype(np.int64)
    image.pixels[first:end, x] = texture.pixels[tex_rows, tex_x]


def draw_floor(image: Image, x: int, wall_height: float) -> None:
    """Fill column ``x`` below the wall slice with the floor colour."""
    half_height = image.height // 2
    image.draw_vertical_line(x, int(half_height + wall_height), image.height - 1, FLOOR_COLOR)