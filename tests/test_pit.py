import pytest

from blockout.colors import Color
from blockout.pit import LAYER_COLORS, Pit


def _fill_layer(pit, z):
    for y in range(pit.depth):
        for x in range(pit.width):
            pit.fill(x, y, z)


def test_new_pit_is_empty():
    pit = Pit(3, 3, 6)
    assert pit.count_occupied_levels() == 0
    assert not any(
        pit.is_occupied(x, y, z)
        for z in range(6)
        for y in range(3)
        for x in range(3)
    )


def test_fill_sets_cell_and_layer_color():
    pit = Pit(5, 5, 8)
    pit.fill(1, 2, 0)
    pit.fill(4, 4, 7)
    assert pit.is_occupied(1, 2, 0)
    assert pit.is_occupied(4, 4, 7)
    assert not pit.is_occupied(2, 1, 0)
    assert pit.colors[0][2][1] == Color.DARK_GRAY
    assert pit.colors[7][4][4] == LAYER_COLORS[7]


def test_in_bounds():
    pit = Pit(3, 4, 5)
    assert pit.in_bounds(0, 0, 0)
    assert pit.in_bounds(2, 3, 4)
    assert not pit.in_bounds(3, 0, 0)
    assert not pit.in_bounds(0, 4, 0)
    assert not pit.in_bounds(0, 0, 5)
    assert not pit.in_bounds(-1, 0, 0)


@pytest.mark.parametrize("cell", [(3, 0, 0), (0, -1, 0), (0, 0, 5)])
def test_out_of_bounds_access_raises(cell):
    pit = Pit(3, 3, 5)
    with pytest.raises(IndexError):
        pit.is_occupied(*cell)
    with pytest.raises(IndexError):
        pit.fill(*cell)


@pytest.mark.parametrize("size", [(0, 3, 3), (6, 3, 3), (3, 6, 3), (3, 3, 9)])
def test_invalid_size_raises(size):
    with pytest.raises(ValueError):
        Pit(*size)


def test_layer_complete_only_when_full():
    pit = Pit(3, 3, 4)
    _fill_layer(pit, 3)
    assert pit.is_layer_complete(3)
    assert not pit.is_layer_complete(2)
    pit.reset()
    for y in range(3):
        for x in range(3):
            if (x, y) != (1, 1):
                pit.fill(x, y, 3)
    assert not pit.is_layer_complete(3)


def test_clear_layer_shifts_layers_down():
    pit = Pit(3, 3, 4)
    _fill_layer(pit, 3)
    pit.fill(0, 0, 2)
    pit.fill(2, 1, 1)
    color_before = pit.colors[2][0][0]
    pit.clear_layer(3)
    assert not pit.is_layer_complete(3)
    assert pit.is_occupied(0, 0, 3)
    assert pit.colors[3][0][0] == color_before
    assert pit.is_occupied(2, 1, 2)
    assert not pit.is_occupied(2, 1, 1)
    assert pit.count_occupied_levels() == 2


def test_clear_layer_leaves_deeper_layers():
    pit = Pit(3, 3, 4)
    pit.fill(1, 1, 3)
    pit.fill(0, 0, 1)
    pit.clear_layer(1)
    assert pit.is_occupied(1, 1, 3)
    assert not pit.is_occupied(0, 0, 1)
    assert pit.count_occupied_levels() == 1


def test_clear_layer_out_of_range():
    pit = Pit(3, 3, 4)
    with pytest.raises(IndexError):
        pit.clear_layer(4)
    with pytest.raises(IndexError):
        pit.is_layer_complete(-1)


def test_count_occupied_levels():
    pit = Pit(4, 4, 6)
    pit.fill(0, 0, 5)
    pit.fill(3, 3, 5)
    pit.fill(2, 1, 2)
    pit.fill(1, 1, 0)
    assert pit.count_occupied_levels() == 3


def test_reset_empties_pit():
    pit = Pit(3, 3, 3)
    _fill_layer(pit, 0)
    _fill_layer(pit, 2)
    pit.reset()
    assert pit.count_occupied_levels() == 0
    assert all(c == 0 for layer in pit.colors for row in layer for c in row)