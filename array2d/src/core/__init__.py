"""Core grid container and helpers."""

from .errors import ConstraintError, Grid2DError, OutOfBoundsError
from .markers import EMPTY, NO_POSITION, NOT_FOUND
from .grid import Extent, Grid2D, create
from .grid_utils import (
    from_list,
    from_numpy,
    from_raw,
    is_grid2d,
    render,
    to_list,
    to_numpy,
    to_raw,
    validate_grid,
)

__all__ = [
    "ConstraintError",
    "Grid2DError",
    "OutOfBoundsError",
    "EMPTY",
    "NOT_FOUND",
    "NO_POSITION",
    "Extent",
    "Grid2D",
    "create",
    "from_list",
    "from_numpy",
    "from_raw",
    "is_grid2d",
    "render",
    "to_list",
    "to_numpy",
    "to_raw",
    "validate_grid",
]
