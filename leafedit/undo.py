"""Undo and redo history for a TextBuffer, merging runs of typed keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .buffer import Key, KeyTracker, TextBuffer

_CHAR_LIMIT = 0xF000


class Command(IntEnum):
    """Kind of change an undo record reverses."""

    INS = 0
    BS = 1
    DEL = 2


@dataclass
class UndoInfo:
    """One recorded change: its kind, span, text and link to the next record."""

    command: Command
    start: int
    end: int
    text: str = ""
    seq: bool = False


def _is_char(keyval: int) -> bool:
    return 0 < keyval < _CHAR_LIMIT


class UndoManager:
    """Records changes made inside user actions and reverses them on request.

    Consecutive single characters typed, deleted or erased with the same key
    are merged into one record.  A record whose ``seq`` flag is set is undone
    together with the record that follows it.
    """

    def __init__(self, buffer: TextBuffer, keys: KeyTracker) -> None:
        self.buffer = buffer
        self.keys = keys
        self.can_undo = False
        self.can_redo = False
        self._undo: list[UndoInfo] = []
        self._redo: list[UndoInfo] = []
        self._tmp: UndoInfo | None = None
        self._modified_step = 0
        self._prev_keyval = 0
        self._seq_reserve = False
        self._recording = False
        buffer.connect("insert-text", self._on_insert)
        buffer.connect("delete-range", self._on_delete)
        buffer.connect("begin-user-action", self._on_begin)
        buffer.connect("end-user-action", self._on_end)
        buffer.connect("modified-changed", self._on_modified_changed)
        self.clear_all()

    @property
    def undo_stack(self) -> tuple[UndoInfo, ...]:
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[UndoInfo, ...]:
        return tuple(self._redo)

    @property
    def modified_step(self) -> int:
        return self._modified_step

    # -- signal handlers -------------------------------------------------

    def _on_begin(self) -> None:
        self._recording = True

    def _on_end(self) -> None:
        self._recording = False

    def _on_modified_changed(self, modified: bool) -> None:
        if not modified:
            self.reset_modified_step()

    def _on_insert(self, start: int, text: str) -> None:
        if self._recording:
            self._record(Command.INS, start, start + len(text), text)

    def _on_delete(self, start: int, end: int) -> None:
        if not self._recording:
            return
        command = Command.BS if self.keys.keyval == Key.BACKSPACE else Command.DEL
        self._record(command, start, end, self.buffer.text[start:end])

    # -- recording -------------------------------------------------------

    def _append(self, command: Command, start: int, end: int, text: str) -> None:
        self._undo.append(UndoInfo(command, start, end, text, self._seq_reserve))
        self._seq_reserve = False

    def _continues(self, tmp: UndoInfo, keyval: int, start: int, end: int) -> bool:
        if keyval == Key.BACKSPACE:
            return end == tmp.start
        if keyval == Key.DELETE:
            return start == tmp.start
        if keyval in (Key.TAB, Key.SPACE):
            return start == tmp.end
        return (
            start == tmp.end
            and _is_char(keyval)
            and self._prev_keyval not in (Key.RETURN, Key.TAB, Key.SPACE)
        )

    def _record(self, command: Command, start: int, end: int, text: str) -> None:
        keyval = self.keys.keyval
        tmp = self._tmp
        if tmp is not None:
            single = end - start == 1 and command == tmp.command
            if single and self._continues(tmp, keyval, start, end):
                if command == Command.BS:
                    tmp.text = text + tmp.text
                    tmp.start -= 1
                else:
                    tmp.text += text
                    tmp.end += 1
                self._redo.clear()
                self._prev_keyval = keyval
                self.can_undo = True
                self.can_redo = False
                return
            self._append(tmp.command, tmp.start, tmp.end, tmp.text)
            self._tmp = None

        if not keyval and self._prev_keyval:
            self.set_sequency(True)

        keyed = _is_char(keyval) or keyval in (Key.BACKSPACE, Key.DELETE, Key.TAB)
        if end - start == 1 and keyed:
            self._tmp = UndoInfo(command, start, end, text)
        else:
            self._append(command, start, end, text)

        self._redo.clear()
        self._prev_keyval = keyval
        self.keys.clear()
        self.can_undo = True
        self.can_redo = False

    def _flush(self) -> None:
        if self._tmp is not None:
            tmp, self._tmp = self._tmp, None
            self._append(tmp.command, tmp.start, tmp.end, tmp.text)

    # -- public interface ------------------------------------------------

    def set_sequency(self, seq: bool) -> None:
        """Set the link flag of the latest record."""
        if self._undo:
            self._undo[-1].seq = bool(seq)

    def set_sequency_reserve(self) -> None:
        """Link the next record to be written with the one after it."""
        self._seq_reserve = True

    def reset_modified_step(self) -> None:
        """Mark the current history position as the unmodified state."""
        self._flush()
        self._modified_step = len(self._undo)

    def clear_all(self) -> None:
        """Forget all history."""
        self._undo.clear()
        self._redo.clear()
        self._tmp = None
        self.reset_modified_step()
        self.can_undo = False
        self.can_redo = False
        self._prev_keyval = 0

    def _check_modified_step(self) -> None:
        at_saved = self._modified_step == len(self._undo)
        if self.buffer.modified == at_saved:
            self.buffer.modified = not at_saved

    def _undo_step(self) -> bool:
        self._flush()
        if self._undo:
            info = self._undo[-1]
            if info.command == Command.INS:
                self.buffer.delete(info.start, info.end)
                cursor = info.start
            else:
                self.buffer.insert(info.start, info.text)
                cursor = info.start + len(info.text)
            self._redo.append(self._undo.pop())
            if self._undo:
                if self._undo[-1].seq:
                    return True
            else:
                self.can_undo = False
            self.can_redo = True
            if info.command == Command.DEL:
                cursor = info.start
            self.buffer.place_cursor(cursor)
        self._check_modified_step()
        return False

    def _redo_step(self) -> bool:
        if self._redo:
            info = self._redo[-1]
            if info.command == Command.INS:
                self.buffer.insert(info.start, info.text)
                cursor = info.start + len(info.text)
            else:
                self.buffer.delete(info.start, info.end)
                cursor = info.start
            self._undo.append(self._redo.pop())
            if info.seq:
                self.set_sequency(True)
                return True
            if not self._redo:
                self.can_redo = False
            self.can_undo = True
            self.buffer.place_cursor(cursor)
        self._check_modified_step()
        return False

    def undo(self) -> int:
        """Undo the latest group of linked records; return how many were undone."""
        before = len(self._redo)
        while self._undo_step():
            pass
        return len(self._redo) - before

    def redo(self) -> int:
        """Redo the next group of linked records; return how many were redone."""
        before = len(self._undo)
        while self._redo_step():
            pass
        return len(self._undo) - before