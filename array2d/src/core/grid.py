"""Dense two-dimensional array container."""

from __future__ import annotations

from numbers import Integral
from typing import Any, Callable, Iterator, List, NamedTuple, Tuple

from array2d.src.core.errors import ConstraintError, OutOfBoundsError
from array2d.src.core.markers import EMPTY, NO_POSITION, NOT_FOUND
from array2d.src.utils import config_loader
from array2d.src.utils.logger import get_logger

logger = get_logger(__name__)

Position = Tuple[int, int]
Callback = Callable[[Any, Position, "Grid2D"], Any]


class Extent(NamedTuple):
    """Length of a grid along each axis."""

    x: int
    y: int


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise ConstraintError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConstraintError(f"{name} must be non-negative, got {value}")
    return int(value)


def _check_count(count: Any, side: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, Integral):
        raise ConstraintError(f"count must be an integer, got {count!r}")
    if side not in (0, 1) or isinstance(side, bool):
        raise ConstraintError(f"side must be 0 or 1, got {side!r}")
    return int(count)


class Grid2D:
    """Grid of ``width`` x ``height`` slots addressed by ``(x, y)``.

    Slots are stored row-major (``rows[y][x]``) but every traversal walks
    column-major: x in the outer loop, y in the inner one. Callbacks handed
    to ``every``, ``find``, ``find_pos``, ``for_each`` and ``filter`` are
    called as ``callback(value, (x, y), grid)`` and must not mutate the grid
    being walked.
    """

    __slots__ = ("_width", "_height", "_rows")

    def __init__(self, width: int, height: int) -> None:
        self._width = _check_dimension("width", width)
        self._height = _check_dimension("height", height)
        self._rows: List[List[Any]] = [
            [EMPTY] * self._width for _ in range(self._height)
        ]

    @classmethod
    def _from_rows(cls, rows: List[List[Any]], width: int, height: int) -> "Grid2D":
        """Adopt an already rectangular ``rows`` buffer without reallocating."""
        grid = cls.__new__(cls)
        grid._width = width
        grid._height = height
        grid._rows = rows
        return grid

    # Dimensions ----------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def length(self) -> Extent:
        """Return ``(x, y)`` lengths as an :class:`Extent`."""
        return Extent(self._width, self._height)

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return self._height, self._width

    @property
    def size(self) -> int:
        """Number of slots holding a value."""
        return sum(1 for row in self._rows for value in row if value is not EMPTY)

    # Slot access ---------------------------------------------------------

    def within(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` is an integer coordinate inside the grid."""
        for v in (x, y):
            if isinstance(v, bool) or not isinstance(v, Integral):
                return False
        return 0 <= x < self._width and 0 <= y < self._height

    def _require(self, x: int, y: int) -> None:
        if not self.within(x, y):
            raise OutOfBoundsError(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> Any:
        """Return the value at ``(x, y)``, ``EMPTY`` if unset."""
        self._require(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, value: Any) -> Any:
        """Store ``value`` at ``(x, y)`` and return what was there before."""
        self._require(x, y)
        old = self._rows[y][x]
        self._rows[y][x] = value
        return old

    def fill(self, value: Any) -> None:
        """Overwrite every slot with ``value``."""
        for row in self._rows:
            row[:] = [value] * self._width

    # Traversal -----------------------------------------------------------

    def items(self) -> Iterator[Tuple[Position, Any]]:
        """Yield ``((x, y), value)`` pairs column by column."""
        rows = self._rows
        for x in range(self._width):
            for y in range(self._height):
                yield (x, y), rows[y][x]

    def every(self, predicate: Callback) -> bool:
        for pos, value in self.items():
            if not predicate(value, pos, self):
                return False
        return True

    def find(self, predicate: Callback) -> Any:
        """Return the first value satisfying ``predicate`` or ``NOT_FOUND``."""
        for pos, value in self.items():
            if predicate(value, pos, self):
                return value
        return NOT_FOUND

    def find_pos(self, predicate: Callback) -> Position:
        """Return the first ``(x, y)`` satisfying ``predicate`` or ``(-1, -1)``."""
        for pos, value in self.items():
            if predicate(value, pos, self):
                return pos
        return NO_POSITION

    def for_each(self, callback: Callback) -> None:
        for pos, value in self.items():
            callback(value, pos, self)

    def includes(self, value: Any) -> bool:
        """Return ``True`` if any slot equals ``value``.

        Unset slots only match when ``value`` is ``EMPTY`` itself.
        """
        if value is EMPTY:
            return any(v is EMPTY for _, v in self.items())
        for _, v in self.items():
            if v is EMPTY:
                continue
            if v is value or v == value:
                return True
        return False

    # Derived grids -------------------------------------------------------

    def filter(self, predicate: Callback) -> "Grid2D":
        """Return a grid holding only the slots that satisfy ``predicate``.

        The result is cropped to the origin-anchored rectangle containing
        every match; a grid without matches yields a 0 x 0 result.
        """
        kept = Grid2D(self._width, self._height)
        right = bottom = -1
        for (x, y), value in self.items():
            if predicate(value, (x, y), self):
                kept._rows[y][x] = value
                right = max(right, x)
                bottom = max(bottom, y)
        logger.debug("filter kept bounding box %dx%d", right + 1, bottom + 1)
        return kept.resize(right + 1, bottom + 1)

    def resize(self, width: int, height: int) -> "Grid2D":
        """Return a copy cropped to ``width`` x ``height``.

        Both dimensions are clamped into ``[0, current]``; growing is done
        with :meth:`insert_column` and :meth:`insert_row`.
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ConstraintError(f"{name} must be an integer, got {value!r}")
        new_w = min(max(int(width), 0), self._width)
        new_h = min(max(int(height), 0), self._height)
        result = Grid2D._from_rows(
            [row[:new_w] for row in self._rows[:new_h]], new_w, new_h
        )
        logger.debug(
            "resize %dx%d -> %dx%d", self._width, self._height, new_w, new_h
        )
        return result

    def copy(self) -> "Grid2D":
        return self.resize(self._width, self._height)

    # Structural mutation -------------------------------------------------

    def insert_column(self, count: int, side: int = 1) -> None:
        """Insert ``count`` empty columns, or remove ``-count`` columns.

        ``side=1`` works on the right edge, ``side=0`` on the left edge.
        """
        count = _check_count(count, side)
        if count == 0:
            return
        if count > 0:
            pad = [EMPTY] * count
            for row in self._rows:
                if side:
                    row.extend(pad)
                else:
                    row[0:0] = pad
            self._width += count
        else:
            if side:
                start = min(max(self._width + count, 0), self._width)
                for row in self._rows:
                    del row[start:]
                removed = self._width - start
            else:
                removed = min(-count, self._width)
                for row in self._rows:
                    del row[:removed]
            self._width -= removed
        logger.debug("insert_column(%d, %d) -> width %d", count, side, self._width)

    def insert_row(self, count: int, side: int = 1) -> None:
        """Insert ``count`` empty rows, or remove ``-count`` rows.

        ``side=1`` works on the bottom edge, ``side=0`` on the top edge.
        """
        count = _check_count(count, side)
        if count == 0:
            return
        if count > 0:
            new_rows = [[EMPTY] * self._width for _ in range(count)]
            if side:
                self._rows.extend(new_rows)
            else:
                self._rows[0:0] = new_rows
            self._height += count
        else:
            if side:
                start = min(max(self._height + count, 0), self._height)
                del self._rows[start:]
                removed = self._height - start
            else:
                removed = min(-count, self._height)
                del self._rows[:removed]
            self._height -= removed
        logger.debug("insert_row(%d, %d) -> height %d", count, side, self._height)

    # Protocols -----------------------------------------------------------

    def __contains__(self, value: Any) -> bool:
        return self.includes(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return self.shape() == other.shape() and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def _dump(self, empty: str, filled: str) -> str:
        return "\n".join(
            "".join(empty if v is EMPTY else filled for v in row) for row in self._rows
        )

    def __str__(self) -> str:
        return self._dump(config_loader.EMPTY_GLYPH, config_loader.FILLED_GLYPH)

    def __repr__(self) -> str:
        return f"Grid2D(width={self._width}, height={self._height}, size={self.size})"


def create(width: int, height: int) -> Grid2D:
    """Return a new ``width`` x ``height`` grid with every slot unset."""
    return Grid2D(width, height)


__all__ = ["Grid2D", "Extent", "create"]
