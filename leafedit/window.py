"""Main window state: title tracking, save availability and fullscreen."""

from __future__ import annotations

import os

from .buffer import TextBuffer

UNTITLED = "Untitled"


def file_basename(filename: str | None) -> str:
    """Name shown for a file, or a placeholder when there is none."""
    if not filename:
        return UNTITLED
    return os.path.basename(filename.rstrip(os.sep)) or filename


def window_title(filename: str | None, modified: bool) -> str:
    """Window title, marked with a star when the text is modified."""
    name = file_basename(filename)
    return f"*{name}" if modified else name


class MainWindow:
    """Tracks the window title and whether saving makes sense."""

    def __init__(self, buffer: TextBuffer, filename: str | None = None) -> None:
        self.buffer = buffer
        self.fullscreen = False
        self.save_enabled = True
        self._filename = filename
        self._title = file_basename(filename)
        buffer.connect("modified-changed", self._on_modified_changed)

    @property
    def filename(self) -> str | None:
        return self._filename

    @filename.setter
    def filename(self, value: str | None) -> None:
        self._filename = value
        self._title = file_basename(value)

    def _on_modified_changed(self, modified: bool) -> None:
        self._title = window_title(self._filename, modified)
        exists = bool(self._filename) and os.path.exists(self._filename)
        self.save_enabled = modified or not exists

    def title(self) -> str:
        return self._title

    def toggle_fullscreen(self) -> bool:
        """Flip fullscreen and return the new state."""
        self.fullscreen = not self.fullscreen
        return self.fullscreen