"""Conversion and validation helpers for :class:`Grid2D`."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, List, Tuple

import numpy as np

from array2d.src.core.errors import ConstraintError
from array2d.src.core.grid import Grid2D
from array2d.src.core.markers import EMPTY
from array2d.src.utils import config_loader


def is_grid2d(value: Any) -> bool:
    """Return ``True`` if ``value`` is a :class:`Grid2D`."""
    return isinstance(value, Grid2D)


def _rectangular_rows(rows: Any) -> List[List[Any]]:
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise ConstraintError(f"expected a sequence of rows, got {type(rows).__name__}")
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise ConstraintError(f"row {i} is not a sequence")
    if rows:
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ConstraintError(
                    f"row {i} has {len(row)} slots, expected {width}"
                )
    if isinstance(rows, list) and all(isinstance(row, list) for row in rows):
        return rows
    return [row if isinstance(row, list) else list(row) for row in rows]


def to_raw(grid: Grid2D) -> List[List[Any]]:
    """Return the row-major buffer backing ``grid``.

    The buffer is shared, not copied. Mutating it outside the grid is
    undefined behaviour.
    """
    return grid._rows


def from_raw(rows: Sequence[Sequence[Any]]) -> Grid2D:
    """Wrap a nested sequence as a grid.

    A list of lists is adopted as-is; any other sequence of sequences is
    converted into one first. Width is taken from the first row and height
    from the number of rows.
    """
    buffer = _rectangular_rows(rows)
    width = len(buffer[0]) if buffer else 0
    return Grid2D._from_rows(buffer, width, len(buffer))


def to_list(grid: Grid2D, empty: Any = None) -> List[List[Any]]:
    """Return a deep row copy of ``grid`` with unset slots set to ``empty``."""
    return [[empty if v is EMPTY else v for v in row] for row in grid._rows]


def from_list(rows: Sequence[Sequence[Any]], empty: Any = None) -> Grid2D:
    """Build a grid from nested rows, treating cells equal to ``empty`` as unset."""
    copied = [
        list(row) if isinstance(row, Sequence) and not isinstance(row, (str, bytes)) else row
        for row in rows
    ]
    buffer = _rectangular_rows(copied)
    for row in buffer:
        for x, v in enumerate(row):
            if v is empty or v == empty:
                row[x] = EMPTY
    return from_raw(buffer)


def to_numpy(grid: Grid2D, empty: Any = None, dtype: Any = object) -> np.ndarray:
    """Return a ``(height, width)`` array of ``grid`` indexed ``[y, x]``."""
    arr = np.empty(grid.shape(), dtype=dtype)
    for y, row in enumerate(grid._rows):
        for x, v in enumerate(row):
            arr[y, x] = empty if v is EMPTY else v
    return arr


def from_numpy(arr: np.ndarray, empty: Any = None) -> Grid2D:
    """Return a grid holding the cells of a 2D array.

    When ``empty`` is given, cells equal to it become unset slots.
    """
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ConstraintError(f"expected a 2D array, got {arr.ndim} dimensions")
    if arr.shape[0] == 0:
        return Grid2D(arr.shape[1], 0)
    rows = arr.tolist()
    if empty is None:
        return from_raw(rows)
    return from_list(rows, empty=empty)


def render(
    grid: Grid2D, empty_glyph: str | None = None, filled_glyph: str | None = None
) -> str:
    """Return the row-major dump of ``grid`` marking set and unset slots."""
    if empty_glyph is None:
        empty_glyph = config_loader.EMPTY_GLYPH
    if filled_glyph is None:
        filled_glyph = config_loader.FILLED_GLYPH
    return grid._dump(empty_glyph, filled_glyph)


def validate_grid(grid: Any, expected_shape: Tuple[int, int] | None = None) -> bool:
    """Return ``True`` if ``grid`` is well formed and matches ``expected_shape``.

    ``expected_shape`` is given as ``(height, width)`` like :meth:`Grid2D.shape`.
    """

    if not is_grid2d(grid):
        return False

    if expected_shape and grid.shape() != tuple(expected_shape):
        return False

    rows = grid._rows
    if not isinstance(rows, list) or len(rows) != grid.height:
        return False
    for row in rows:
        if not isinstance(row, list) or len(row) != grid.width:
            return False
    return True


__all__ = [
    "is_grid2d",
    "to_raw",
    "from_raw",
    "to_list",
    "from_list",
    "to_numpy",
    "from_numpy",
    "render",
    "validate_grid",
]
