import copy
import pickle

import pytest

from array2d.src.core.errors import ConstraintError, OutOfBoundsError
from array2d.src.core.grid import Grid2D, create
from array2d.src.core.markers import EMPTY


def test_create_starts_empty():
    grid = create(4, 3)
    assert grid.width == 4
    assert grid.height == 3
    assert grid.size == 0
    for x in range(4):
        for y in range(3):
            assert grid.get(x, y) is EMPTY


def test_create_zero_dimensions():
    grid = create(0, 0)
    assert grid.length == (0, 0)
    assert grid.size == 0
    assert str(grid) == ""


@pytest.mark.parametrize("width,height", [(-1, 2), (2, -3), (1.5, 2), ("2", 2), (True, 1)])
def test_create_rejects_bad_dimensions(width, height):
    with pytest.raises(ConstraintError):
        Grid2D(width, height)


def test_set_returns_previous_value():
    grid = create(2, 2)
    assert grid.set(1, 0, "a") is EMPTY
    assert grid.set(1, 0, "b") == "a"
    assert grid.get(1, 0) == "b"


def test_set_get_every_coordinate():
    grid = create(3, 2)
    for x in range(3):
        for y in range(2):
            grid.set(x, y, (x, y))
    for x in range(3):
        for y in range(2):
            assert grid.get(x, y) == (x, y)
    assert grid.size == 6


def test_none_is_a_stored_value():
    grid = create(2, 1)
    grid.set(0, 0, None)
    assert grid.get(0, 0) is None
    assert grid.size == 1


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (5, 5)])
def test_out_of_bounds_access(x, y):
    grid = create(3, 2)
    assert not grid.within(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.get(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.set(x, y, 1)
    assert grid.size == 0


def test_out_of_bounds_error_details():
    grid = create(3, 2)
    with pytest.raises(IndexError) as exc:
        grid.get(3, 1)
    assert exc.value.x == 3
    assert exc.value.width == 3
    assert exc.value.height == 2


def test_within_edges():
    grid = create(3, 2)
    assert grid.within(0, 0)
    assert grid.within(2, 1)
    assert not grid.within(3, 1)
    assert not grid.within(2, 2)


def test_fill_sets_every_slot():
    grid = create(3, 4)
    grid.set(1, 1, "x")
    grid.fill(7)
    assert grid.size == 12
    assert grid.every(lambda v, pos, g: v == 7)


def test_fill_with_empty_clears():
    grid = create(2, 2)
    grid.fill(1)
    grid.fill(EMPTY)
    assert grid.size == 0


def test_shape_and_length():
    grid = create(5, 2)
    assert grid.shape() == (2, 5)
    assert grid.length.x == 5
    assert grid.length.y == 2


def test_dimensions_are_read_only():
    grid = create(2, 2)
    with pytest.raises(AttributeError):
        grid.width = 3


def test_str_dump():
    grid = create(3, 2)
    grid.set(0, 0, "F")
    grid.set(2, 1, "F")
    assert str(grid) == "F..\n..F"
    assert str(grid).split("\n") == ["F..", "..F"]


def test_repr():
    grid = create(3, 2)
    grid.set(0, 0, 1)
    assert repr(grid) == "Grid2D(width=3, height=2, size=1)"


def test_equality_and_copy():
    grid = create(2, 2)
    grid.set(0, 1, [1])
    dup = grid.copy()
    assert dup == grid
    dup.set(1, 1, 5)
    assert dup != grid
    assert grid.get(1, 1) is EMPTY


def test_empty_marker_identity():
    assert copy.deepcopy(EMPTY) is EMPTY
    assert pickle.loads(pickle.dumps(EMPTY)) is EMPTY
    assert not EMPTY
    assert repr(EMPTY) == "EMPTY"


@pytest.mark.parametrize("x,y", [(1.5, 0), (0, "1"), (True, 0), (None, 0)])
def test_non_integer_coordinates_are_out_of_bounds(x, y):
    grid = create(3, 2)
    assert not grid.within(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.get(x, y)
    with pytest.raises(OutOfBoundsError):
        grid.set(x, y, 1)
