"""Character-coding and line-ending choices offered when opening or saving a file."""

from __future__ import annotations

import codecs
import copy
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

CURRENT_LOCALE = "Current Locale ({})"
AUTO_DETECT = "Auto-Detect"
OTHER_CODESET = "Other Codeset"
NOT_SUPPORTED = "'{}' is not supported"
UTF8 = "UTF-8"

# Charsets that are offered together: choosing one as the locale adds the other.
_PAIRED = ("BIG5", "GB18030")


class LineEnd(Enum):
    """Line terminator written when saving, labelled as in the menu."""

    LF = "LF"
    CRLF = "CR+LF"
    CR = "CR"

    @property
    def label(self) -> str:
        return self.value

    @property
    def chars(self) -> str:
        return {"LF": "\n", "CR+LF": "\r\n", "CR": "\r"}[self.value]


class DialogMode(IntEnum):
    """Whether the file dialog saves or opens."""

    SAVE = 0
    OPEN = 1


@dataclass
class FileInfo:
    """A file name with the coding and line ending used to read or write it."""

    filename: Optional[str] = None
    charset: Optional[str] = None
    charset_flag: bool = False
    lineend: LineEnd = field(default=LineEnd.LF)


def is_supported_charset(name: str | None) -> bool:
    """True when text can be converted to and from the named coding."""
    if not name:
        return False
    try:
        codecs.lookup(name)
        "TEST".encode(name).decode(name)
    except (LookupError, UnicodeError, TypeError, ValueError):
        return False
    return True


def charset_table(
    default_charset: str, encoding_items: Iterable[Optional[str]] = ()
) -> list[tuple[str, str]]:
    """Charsets offered in the menu as (charset, label) pairs, in menu order.

    The locale's own charset comes first, then its BIG5/GB18030 partner if it
    has one, then UTF-8, then every non-empty item of ``encoding_items``.
    """
    table = [(default_charset, CURRENT_LOCALE.format(default_charset))]
    for index, name in enumerate(_PAIRED):
        if default_charset.casefold() == name.casefold():
            partner = _PAIRED[index ^ 1]
            table.append((partner, partner))
            break
    table.append((UTF8, UTF8))
    table.extend((item, item) for item in encoding_items if item)
    return table


def normalize_selected_path(path: str) -> str:
    """A chosen directory gets a trailing separator; other paths are unchanged."""
    if os.path.isdir(path) and not path.endswith(os.sep):
        return path + os.sep
    return path


def _manual_label(charset: str | None) -> str:
    if charset:
        return f"{OTHER_CODESET} ({charset})"
    return f"{OTHER_CODESET}..."


class CharsetMenu:
    """The character-coding option menu of the file dialog.

    Works on a copy of the given file info, available as ``file_info``.
    In open mode the first item asks for auto-detection; the last item
    always lets the user type a coding of their own.
    """

    def __init__(
        self,
        file_info: FileInfo,
        mode: DialogMode,
        default_charset: str,
        encoding_items: Sequence[Optional[str]] = (),
    ) -> None:
        self.mode = DialogMode(mode)
        self.file_info = copy.copy(file_info)
        self.table = charset_table(default_charset, encoding_items)
        info = self.file_info
        self.manual_label = _manual_label(info.charset if info.charset_flag else None)
        self.index = 0

        position = 0
        if info.charset:
            wanted = info.charset.casefold()
            position = next(
                (i for i, (name, _) in enumerate(self.table) if name.casefold() == wanted),
                len(self.table),
            )
            if self.mode == DialogMode.OPEN and not info.charset_flag:
                info.charset = None
            elif position == len(self.table) and not info.charset_flag:
                self.manual_label = _manual_label(info.charset)
            position += self.mode
        if self.mode == DialogMode.SAVE or info.charset_flag:
            self.index = position

    def labels(self) -> list[str]:
        """Menu item labels, in order."""
        items = [AUTO_DETECT] if self.mode == DialogMode.OPEN else []
        items.extend(label for _, label in self.table)
        items.append(self.manual_label)
        return items

    def select(self, index: int, manual_charset: str | None = None) -> bool:
        """Choose a menu item; report whether the choice took effect.

        Choosing the last item uses ``manual_charset``; None or an empty
        name cancels and keeps the previous item.  An unsupported name also
        keeps the previous item and raises ValueError.
        """
        fixed = len(self.table) + self.mode
        if not 0 <= index <= fixed:
            raise IndexError(f"menu item {index} out of range")
        previous = self.index
        self.index = index
        info = self.file_info
        if index < fixed:
            if index == 0 and self.mode == DialogMode.OPEN:
                info.charset = None
            else:
                info.charset = self.table[index - self.mode][0]
            return True

        if not manual_charset:
            self.index = previous
            return False
        if not is_supported_charset(manual_charset):
            self.index = previous
            raise ValueError(NOT_SUPPORTED.format(manual_charset))
        info.charset = manual_charset
        info.charset_flag = True
        self.manual_label = _manual_label(manual_charset)
        return True