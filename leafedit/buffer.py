"""A plain-text buffer with cursor, selection and change notifications."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

CONTROL_FLAG = 0x10000

_EVENTS = (
    "insert-text",
    "delete-range",
    "begin-user-action",
    "end-user-action",
    "modified-changed",
    "mark-set",
)


class Key(IntEnum):
    """Key values the editor reacts to."""

    SPACE = 0x0020
    ISO_LEFT_TAB = 0xFE20
    BACKSPACE = 0xFF08
    TAB = 0xFF09
    RETURN = 0xFF0D
    UP = 0xFF52
    DOWN = 0xFF54
    PAGE_UP = 0xFF55
    PAGE_DOWN = 0xFF56
    KP_ENTER = 0xFF8D
    CONTROL_L = 0xFFE3
    CONTROL_R = 0xFFE4
    DELETE = 0xFFFF


class KeyTracker:
    """Remembers the last key pressed, flagging keys typed with Control held."""

    def __init__(self) -> None:
        self.keyval = 0

    def press(self, keyval: int, control: bool = False) -> int:
        """Record a key press and return the stored value."""
        value = int(keyval)
        if control or value in (Key.CONTROL_L, Key.CONTROL_R):
            value += CONTROL_FLAG
        self.keyval = value
        return value

    def clear(self) -> None:
        """Forget the last key."""
        self.keyval = 0


class TextBuffer:
    """Text with an insert mark, a selection bound and event handlers.

    Handlers receive:
      insert-text: (start, text), after the text is in place;
      delete-range: (start, end), before the text is removed;
      begin-user-action / end-user-action / mark-set: no arguments;
      modified-changed: (modified).
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = 0
        self._bound = 0
        self._modified = False
        self._depth = 0
        self._handlers: dict[str, list[Callable]] = {event: [] for event in _EVENTS}

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def selection_bound(self) -> int:
        return self._bound

    @property
    def modified(self) -> bool:
        return self._modified

    @modified.setter
    def modified(self, value: bool) -> None:
        value = bool(value)
        if value != self._modified:
            self._modified = value
            self._emit("modified-changed", value)

    def connect(self, event: str, handler: Callable) -> Callable:
        """Register a handler for an event and return it."""
        try:
            self._handlers[event].append(handler)
        except KeyError:
            raise ValueError(f"unknown event: {event!r}") from None
        return handler

    def _emit(self, event: str, *args) -> None:
        for handler in list(self._handlers[event]):
            handler(*args)

    def _check(self, offset: int) -> None:
        if not 0 <= offset <= len(self._text):
            raise IndexError(f"offset {offset} outside buffer of length {len(self._text)}")

    def insert(self, offset: int, text: str) -> None:
        """Insert text at an offset; marks at or after it move along."""
        self._check(offset)
        if not text:
            return
        self._text = self._text[:offset] + text + self._text[offset:]
        size = len(text)
        if self._cursor >= offset:
            self._cursor += size
        if self._bound >= offset:
            self._bound += size
        self.modified = True
        self._emit("insert-text", offset, text)

    def delete(self, start: int, end: int) -> None:
        """Delete the text between two offsets, in either order."""
        self._check(start)
        self._check(end)
        lo, hi = sorted((start, end))
        if lo == hi:
            return
        self._emit("delete-range", lo, hi)
        self._text = self._text[:lo] + self._text[hi:]

        def shift(mark: int) -> int:
            if mark >= hi:
                return mark - (hi - lo)
            return lo if mark > lo else mark

        self._cursor = shift(self._cursor)
        self._bound = shift(self._bound)
        self.modified = True

    def insert_at_cursor(self, text: str) -> None:
        """Insert text at the insert mark."""
        self.insert(self._cursor, text)

    def place_cursor(self, offset: int) -> None:
        """Move both marks to an offset, clearing the selection."""
        self._check(offset)
        self._cursor = self._bound = offset
        self._emit("mark-set")

    def select_range(self, start: int, end: int) -> None:
        """Put the insert mark at start and the selection bound at end."""
        self._check(start)
        self._check(end)
        self._cursor, self._bound = start, end
        self._emit("mark-set")

    def selection_bounds(self) -> tuple[int, int] | None:
        """Return the ordered selection, or None when nothing is selected."""
        if self._cursor == self._bound:
            return None
        return min(self._cursor, self._bound), max(self._cursor, self._bound)

    def delete_selection(self) -> bool:
        """Delete the selection as one user action; report whether anything went."""
        bounds = self.selection_bounds()
        if bounds is None:
            return False
        self.begin_user_action()
        try:
            self.delete(*bounds)
        finally:
            self.end_user_action()
        return True

    def line_count(self) -> int:
        return self._text.count("\n") + 1

    def line_of_offset(self, offset: int) -> int:
        """Zero-based line holding an offset."""
        self._check(offset)
        return self._text.count("\n", 0, offset)

    def offset_of_line(self, line: int) -> int:
        """Offset at the start of a zero-based line; past the last line gives the end."""
        if line < 0:
            raise ValueError(f"negative line number: {line}")
        if line >= self.line_count():
            return len(self._text)
        return sum(len(part) + 1 for part in self._text.split("\n")[:line])

    def begin_user_action(self) -> None:
        """Open a user action; only the outermost one is announced."""
        self._depth += 1
        if self._depth == 1:
            self._emit("begin-user-action")

    def end_user_action(self) -> None:
        """Close a user action opened by begin_user_action."""
        if self._depth == 0:
            raise RuntimeError("end_user_action without begin_user_action")
        self._depth -= 1
        if self._depth == 0:
            self._emit("end-user-action")


def selection_has_newline(buffer: TextBuffer) -> bool:
    """True when the selected text spans more than one line."""
    bounds = buffer.selection_bounds()
    if bounds is None:
        return False
    start, end = bounds
    return "\n" in buffer.text[start:end]