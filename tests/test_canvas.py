import pytest

from blockout.canvas import Canvas


def _lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get(x, y)
    }


def test_set_and_get_round_trip():
    canvas = Canvas(20, 10)
    canvas.set(3, 4, 7)
    assert canvas.get(3, 4) == 7
    assert canvas.get(4, 3) == 0


def test_set_outside_is_clipped():
    canvas = Canvas(8, 8)
    canvas.set(-1, 0, 5)
    canvas.set(8, 8, 5)
    assert _lit(canvas) == set()


def test_get_outside_raises():
    canvas = Canvas(8, 8)
    with pytest.raises(IndexError):
        canvas.get(8, 0)
    with pytest.raises(IndexError):
        canvas.get(0, -1)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-3, 4)])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Canvas(*size)


@pytest.mark.parametrize(
    "line", [(0, 0, 9, 4), (9, 4, 0, 0), (2, 1, 3, 9), (5, 5, 5, 5), (0, 7, 7, 0)]
)
def test_line_includes_endpoints_and_is_connected(line):
    x0, y0, x1, y1 = line
    canvas = Canvas(12, 12)
    canvas.draw_line(1, x0, y0, x1, y1)
    lit = _lit(canvas)
    assert (x0, y0) in lit and (x1, y1) in lit
    assert len(lit) == max(abs(x1 - x0), abs(y1 - y0)) + 1


def test_line_is_symmetric_in_direction():
    a = Canvas(16, 16)
    b = Canvas(16, 16)
    a.draw_line(3, 1, 2, 13, 7)
    b.draw_line(3, 13, 7, 1, 2)
    assert _lit(a) == _lit(b)


def test_line_partly_outside_is_clipped():
    canvas = Canvas(5, 5)
    canvas.draw_line(2, -3, 2, 7, 2)
    assert _lit(canvas) == {(x, 2) for x in range(5)}


def test_hline_and_vline():
    canvas = Canvas(10, 10)
    canvas.draw_hline(4, 2, 3, 5)
    canvas.draw_vline(6, 8, 1, 4)
    assert _lit(canvas) == {(x, 3) for x in range(2, 7)} | {(8, y) for y in range(1, 5)}
    assert canvas.get(8, 2) == 6
    assert canvas.get(2, 3) == 4


def test_hline_clipped_at_edges():
    canvas = Canvas(6, 6)
    canvas.draw_hline(1, -2, 0, 20)
    canvas.draw_hline(1, 0, 9, 3)
    assert _lit(canvas) == {(x, 0) for x in range(6)}


def test_fill_rect_covers_area():
    canvas = Canvas(10, 10)
    canvas.fill_rect(9, 2, 3, 4, 2)
    assert _lit(canvas) == {(x, y) for x in range(2, 6) for y in range(3, 5)}


def test_erase_clears_everything():
    canvas = Canvas(7, 7)
    canvas.fill_rect(5, 0, 0, 7, 7)
    canvas.erase()
    assert _lit(canvas) == set()