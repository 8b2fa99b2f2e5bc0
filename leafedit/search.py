"""Finding, highlighting and replacing text in a buffer, and jumping to lines."""

from __future__ import annotations

from typing import Callable, Optional

from .buffer import TextBuffer
from .history import update_history
from .undo import UndoManager

NOT_FOUND = "Search string not found"
REPLACED = "{} strings replaced"

Span = tuple[int, int]
Confirm = Callable[[int, int], Optional[bool]]


def _fold_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def _fold(text: str) -> str:
    """Lower-case text one character at a time, keeping offsets intact."""
    return "".join(_fold_char(char) for char in text)


def _prepare(text: str, pattern: str, match_case: bool) -> tuple[str, str]:
    if match_case:
        return text, pattern
    return _fold(text), _fold(pattern)


def find_all(text: str, pattern: str, match_case: bool = False) -> list[Span]:
    """Spans of every non-overlapping occurrence of pattern, left to right."""
    if not pattern:
        return []
    hay, needle = _prepare(text, pattern, match_case)
    size = len(needle)
    spans = []
    pos = hay.find(needle)
    while pos != -1:
        spans.append((pos, pos + size))
        pos = hay.find(needle, pos + size)
    return spans


def _shift_mark(mark: int, start: int, end: int, inserted: int) -> int:
    """Where a right-gravity mark ends up after [start, end) is replaced."""
    if mark < start:
        return mark
    if mark < end:
        return start + inserted
    return mark + inserted - (end - start)


class Searcher:
    """Search and replace state for one buffer.

    Matches are selected with the insert mark at the end of the match and the
    selection bound at its start.  Messages meant for the user are collected
    in ``messages``.
    """

    def __init__(self, buffer: TextBuffer, undo: UndoManager | None = None) -> None:
        self.buffer = buffer
        self.undo = undo
        self.find_text: str | None = None
        self.replace_text: str | None = None
        self.match_case = False
        self.replace_all = False
        self.find_history: list[str] = []
        self.replace_history: list[str] = []
        self.matches: list[Span] = []
        self.replaced: list[Span] = []
        self.highlighted = False
        self.messages: list[str] = []
        self.confirm: Confirm | None = None
        buffer.connect("insert-text", self._on_edit)
        buffer.connect("delete-range", self._on_edit)

    def _on_edit(self, *_args) -> None:
        self.highlighted = False

    def _link(self, seq: bool) -> None:
        if self.undo is not None:
            self.undo.set_sequency(seq)

    def _needle(self) -> tuple[str, str]:
        return _prepare(self.buffer.text, self.find_text or "", self.match_case)

    def _forward(self, offset: int) -> Span | None:
        hay, needle = self._needle()
        pos = hay.find(needle, offset)
        return None if pos == -1 else (pos, pos + len(needle))

    def _backward(self, offset: int) -> Span | None:
        hay, needle = self._needle()
        pos = hay.rfind(needle, 0, offset)
        return None if pos == -1 else (pos, pos + len(needle))

    def highlight(self) -> bool:
        """Mark every occurrence of the search text; report whether any exist."""
        if not self.find_text:
            return False
        self.replaced = []
        self.matches = find_all(self.buffer.text, self.find_text, self.match_case)
        self.highlighted = True
        return bool(self.matches)

    def search(self, direction: int = 0) -> Span | None:
        """Select the next match from the cursor, wrapping around the buffer.

        A negative direction searches backwards.  Direction 0 refreshes the
        highlighting and reports a missing match; direction 2 leaves the
        highlighting alone.
        """
        if not self.find_text:
            return None
        if direction == 0 or (direction != 2 and not self.highlighted):
            self.highlight()

        cursor = self.buffer.cursor
        if direction < 0:
            match = self._backward(cursor)
            if match is not None and match[1] == cursor:
                match = self._backward(match[0])
        else:
            match = self._forward(cursor)

        if match is None:
            if direction < 0:
                match = self._backward(len(self.buffer.text))
            else:
                match = self._forward(0)

        if match is not None:
            self.buffer.select_range(match[1], match[0])
        elif direction == 0:
            self.messages.append(NOT_FOUND)
        return match

    def replace(self, confirm: Confirm | None = None) -> int:
        """Replace matches of the search text with the replacement text.

        With ``replace_all`` every match is replaced at once and the cursor
        returns to where it was.  Otherwise each match is offered to confirm,
        which answers True to replace, False to skip or None to stop; no
        confirm means every match is replaced.  Returns the number replaced,
        or -1 when stopped before the first replacement.
        """
        if not self.find_text:
            return 0
        buffer = self.buffer
        replacement = self.replace_text or ""
        num = 0
        pos = 0
        mark = buffer.cursor

        if self.replace_all:
            self.matches = []
            self.replaced = []
        else:
            self.highlight()

        while True:
            if self.replace_all:
                match = self._forward(pos)
                if match is None:
                    break
                buffer.select_range(match[1], match[0])
            else:
                match = self.search(2)
                if match is None:
                    break
                answer = True if confirm is None else confirm(*match)
                if answer is None:
                    if num == 0:
                        num = -1
                    break
                if not answer:
                    continue

            start, end = match
            buffer.delete_selection()
            if replacement:
                offset = buffer.cursor
                self._link(True)
                buffer.begin_user_action()
                try:
                    buffer.insert_at_cursor(replacement)
                finally:
                    buffer.end_user_action()
                pos = buffer.cursor
                self.replaced.append((offset, pos))
            else:
                pos = buffer.cursor

            if self.replace_all:
                mark = _shift_mark(mark, start, end, len(replacement))
            num += 1
            self._link(self.replace_all)

        if self.replace_all:
            buffer.place_cursor(mark)
            self.messages.append(REPLACED.format(num))
            self._link(False)
        return num

    def submit(self, find: str, replace: str | None = None):
        """Accept the find (and replace) dialog and run it.

        Returns the match selected by a search, the count from a replace,
        or None when the search text is empty.
        """
        self.find_history = update_history(self.find_history, find)
        self.find_text = find
        if replace is not None:
            self.replace_history = update_history(self.replace_history, replace)
            self.replace_text = replace
        if not find:
            return None
        if replace is not None:
            return self.replace(self.confirm)
        return self.search(0)


def jump_to_line(buffer: TextBuffer, line: int) -> int:
    """Put the cursor at the start of a one-based line, kept within the buffer."""
    line = max(1, min(line, buffer.line_count()))
    offset = buffer.offset_of_line(line - 1)
    buffer.place_cursor(offset)
    return offset