"""Search history lists and reading a document piped on standard input."""

from __future__ import annotations

import select
import sys
from typing import IO

STDIN_DELAY = 0.1


def update_history(history: list[str], text: str) -> list[str]:
    """Return the history with text moved or added to the front.

    Empty text leaves the history unchanged.
    """
    entries = list(history)
    if not text:
        return entries
    try:
        entries.remove(text)
    except ValueError:
        pass
    entries.insert(0, text)
    return entries


def _ready(stream: IO) -> bool:
    try:
        fd = stream.fileno()
    except (OSError, ValueError):
        return True
    try:
        readable, _, _ = select.select([fd], [], [], STDIN_DELAY)
    except (OSError, ValueError):
        return not stream.isatty()
    return bool(readable)


def read_stdin(stream: IO | None = None):
    """Read everything waiting on a stream, standard input by default.

    Returns None when nothing arrives within a short delay or reading fails.
    The stream is closed once read.
    """
    if stream is None:
        stream = sys.stdin
    if not _ready(stream):
        return None
    try:
        contents = stream.read()
    except OSError:
        return None
    stream.close()
    return contents