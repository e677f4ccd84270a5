"""In-memory images of packed 0xRRGGBB pixels and texture loading."""

from __future__ import annotations

import os

import numpy as np
from PIL import Image as PILImage

from .errors import Cub3dError


def rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue components into one 0xRRGGBB integer."""
    return 0x0 << 24 | r << 16 | g << 8 | b


class Image:
    """A width x height grid of packed colours, indexed as ``pixels[y, x]``."""

    def __init__(self, width: int, height: int, pixels: np.ndarray | None = None) -> None:
        if pixels is None:
            pixels = np.zeros((height, width), dtype=np.uint32)
        elif pixels.shape != (height, width):
            raise ValueError(
                f"pixel array has shape {pixels.shape}, expected {(height, width)}"
            )
        self.width = width
        self.height = height
        self.pixels = pixels

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")

    def plot(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to ``color``."""
        x, y = int(x), int(y)
        self._check(x, y)
        self.pixels[y, x] = color

    def get(self, x: int, y: int) -> int:
        """Return the colour of the pixel at ``(x, y)``."""
        x, y = int(x), int(y)
        self._check(x, y)
        return int(self.pixels[y, x])

    def draw_vertical_line(self, x: int, start_y: int, end_y: int, color: int) -> None:
        """Fill column ``x`` from ``start_y`` to ``end_y`` inclusive.

        Nothing is drawn when the line starts below the image; a negative start
        is moved to the top row and the end is kept inside the image.
        """
        start = int(start_y)
        end = int(end_y)
        if start >= self.height:
            return
        start = max(start, 0)
        end = min(end, self.height - 1)
        if start > end:
            return
        self._check(int(x), start)
        self.pixels[start : end + 1, int(x)] = color


def load_texture(file_name: str | os.PathLike[str]) -> Image:
    """Load an image file as a texture of packed colours."""
    try:
        with PILImage.open(file_name) as picture:
            channels = np.asarray(picture.convert("RGB"), dtype=np.uint32)
    except (OSError, ValueError) as exc:
        raise Cub3dError("could not load texture!") from exc
    packed = (channels[..., 0] << 16) | (channels[..., 1] << 8) | channels[..., 2]
    height, width = packed.shape
    return Image(width, height, packed.astype(np.uint32))