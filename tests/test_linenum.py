import pytest

from leafedit.linenum import SUBMARGIN, LineNumberGutter, visible_lines

TOPS = [(0, 10), (10, 10), (20, 10), (30, 10)]


def test_visible_lines_window():
    assert visible_lines(TOPS, 12, 25) == [(1, 10), (2, 20)]


def test_visible_lines_beyond_end_gives_last_line():
    assert visible_lines(TOPS, 500, 600) == [(3, 30)]


def test_visible_lines_whole_buffer():
    assert [n for n, _ in visible_lines(TOPS, 0, 1000)] == [0, 1, 2, 3]


def test_visible_lines_empty():
    assert visible_lines([], 0, 100) == []


def test_hidden_border_is_submargin():
    gutter = LineNumberGutter(8)
    assert gutter.show(False) == SUBMARGIN
    assert gutter.border_width(1000) == SUBMARGIN


def test_show_matches_border_for_small_buffers():
    gutter = LineNumberGutter(8)
    width = gutter.show(True)
    assert width == gutter.border_width(1)
    assert gutter.border_width(5) == gutter.border_width(99)


def test_border_grows_with_many_lines():
    gutter = LineNumberGutter(8)
    gutter.show(True)
    assert gutter.border_width(1_000_000) > gutter.border_width(99)


def test_labels_visible():
    gutter = LineNumberGutter(8)
    gutter.show(True)
    assert gutter.labels(TOPS, 12, 25) == [("2", 10), ("3", 20)]


def test_labels_empty_buffer_shows_one():
    gutter = LineNumberGutter(8)
    gutter.show(True)
    assert gutter.labels([], 0, 100) == [("1", 0)]


def test_labels_hidden():
    gutter = LineNumberGutter(8)
    assert gutter.labels(TOPS, 0, 100) == []


def test_invalid_char_width():
    with pytest.raises(ValueError):
        LineNumberGutter(0)