"""Line-number gutter: which lines are on screen and how wide the margin is."""

from __future__ import annotations

from collections.abc import Sequence

MARGIN = 5
SUBMARGIN = 2
MIN_COLUMNS = 4
MIN_DIGITS_VALUE = 99

LineTop = tuple[int, int]


def _line_at_y(line_tops: Sequence[LineTop], y: int) -> int:
    """Index of the line holding a y coordinate, clamped to the first or last line."""
    for index, (top, height) in enumerate(line_tops):
        if top + height > y:
            return index
    return len(line_tops) - 1


def visible_lines(line_tops: Sequence[LineTop], y1: int, y2: int) -> list[tuple[int, int]]:
    """Zero-based line numbers and tops of the lines between y1 and y2.

    ``line_tops`` holds the (top, height) of every line of the buffer, in
    buffer coordinates.  Lines are taken from the one at y1 onwards, stopping
    after the first line that reaches y2.
    """
    if not line_tops:
        return []
    lines = []
    for index in range(_line_at_y(line_tops, y1), len(line_tops)):
        top, height = line_tops[index]
        lines.append((index, top))
        if top + height >= y2:
            break
    return lines


class LineNumberGutter:
    """Left border of a text view that shows line numbers when enabled.

    Text widths are measured as a number of characters times ``char_width``.
    """

    def __init__(self, char_width: int) -> None:
        if char_width <= 0:
            raise ValueError(f"character width must be positive, not {char_width}")
        self.char_width = char_width
        self.visible = False
        self.min_number_width = MIN_COLUMNS * char_width

    def _text_width(self, text: str) -> int:
        return len(text) * self.char_width

    def _layout_width(self, line_count: int) -> int:
        return self._text_width(str(max(MIN_DIGITS_VALUE, line_count)))

    def show(self, visible: bool) -> int:
        """Turn the numbers on or off and return the new border width."""
        self.visible = bool(visible)
        if self.visible:
            return self.min_number_width + MARGIN + SUBMARGIN
        return SUBMARGIN

    def border_width(self, line_count: int) -> int:
        """Width the border needs for a buffer with this many lines."""
        if not self.visible:
            return SUBMARGIN
        return max(self._layout_width(line_count), self.min_number_width) + MARGIN + SUBMARGIN

    def label_x(self, line_count: int) -> int:
        """Horizontal position at which the right-aligned numbers are drawn."""
        layout = self._layout_width(line_count)
        justify = max(0, self.min_number_width - layout)
        return layout + justify + MARGIN // 2 + 1

    def labels(self, line_tops: Sequence[LineTop], y1: int, y2: int) -> list[tuple[str, int]]:
        """One-based number labels and their tops for the lines to paint.

        A buffer without lines still shows "1" at the top; nothing is painted
        while the numbers are hidden.
        """
        if not self.visible:
            return []
        lines = visible_lines(line_tops, y1, y2) or [(0, 0)]
        return [(str(number + 1), top) for number, top in lines]