"""Textured grid raycaster that renders .cub maps in a pygame window."""

__version__ = "0.1.0"