"""Exceptions raised by the grid container."""

from __future__ import annotations

__all__ = ["Grid2DError", "ConstraintError", "OutOfBoundsError"]


class Grid2DError(Exception):
    """Base class for grid container errors."""


class ConstraintError(Grid2DError, ValueError):
    """Raised when dimensions, counts or input buffers are malformed."""


class OutOfBoundsError(Grid2DError, IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"coordinate ({x}, {y}) outside grid of width {width} and height {height}"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height
