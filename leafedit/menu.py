"""Menu layout of the editor and the sensitivity of its items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MenuEntry:
    """One item of the menu bar."""

    path: str
    accelerator: Optional[str] = None
    action: Optional[str] = None
    kind: str = "Item"
    stock_id: Optional[str] = None

    @property
    def key(self) -> str:
        """Path with mnemonic underscores removed."""
        return _strip(self.path)


def _strip(path: str) -> str:
    return path.replace("_", "")


# Accelerators beyond those shown in the menu, keyed by item path.
EXTRA_ACCELERATORS = {
    "/Edit/Redo": ("<control>Y",),
    "/Search/Find Next": ("F3",),
    "/Search/Find Previous": ("<shift>F3",),
    "/Search/Replace...": ("<control>R",),
}

# Key bindings with no menu item.
HIDDEN_BINDINGS = {
    "<control>W": "file_close",
    "<control>T": "option_always_on_top",
}

_SELECTION_ITEMS = ("/Edit/Cut", "/Edit/Copy", "/Edit/Delete")
_INITIALLY_DISABLED = ("/Search/Find Next", "/Search/Find Previous")


def build_menu(enable_print: bool = True) -> list[MenuEntry]:
    """Entries of the menu bar, in display order."""
    entries = [
        MenuEntry("/_File", kind="Branch"),
        MenuEntry("/File/_New", "<control>N", "file_new", "StockItem", "gtk-new"),
        MenuEntry("/File/_Open...", "<control>O", "file_open", "StockItem", "gtk-open"),
        MenuEntry("/File/_Save", "<control>S", "file_save", "StockItem", "gtk-save"),
        MenuEntry("/File/Save _As...", "<shift><control>S", "file_save_as",
                  "StockItem", "gtk-save-as"),
        MenuEntry("/File/---", kind="Separator"),
        MenuEntry("/File/Sta_tistics...", None, "file_stats", "StockItem", "gtk-properties"),
    ]
    if enable_print:
        entries += [
            MenuEntry("/File/Print Pre_view", "<shift><control>P", "file_print_preview",
                      "StockItem", "gtk-print-preview"),
            MenuEntry("/File/_Print...", "<control>P", "file_print", "StockItem", "gtk-print"),
            MenuEntry("/File/---", kind="Separator"),
        ]
    entries += [
        MenuEntry("/File/_Quit", "<control>Q", "file_quit", "StockItem", "gtk-quit"),
        MenuEntry("/_Edit", kind="Branch"),
        MenuEntry("/Edit/_Undo", "<control>Z", "edit_undo", "StockItem", "gtk-undo"),
        MenuEntry("/Edit/_Redo", "<shift><control>Z", "edit_redo", "StockItem", "gtk-redo"),
        MenuEntry("/Edit/---", kind="Separator"),
        MenuEntry("/Edit/Cu_t", "<control>X", "edit_cut", "StockItem", "gtk-cut"),
        MenuEntry("/Edit/_Copy", "<control>C", "edit_copy", "StockItem", "gtk-copy"),
        MenuEntry("/Edit/_Paste", "<control>V", "edit_paste", "StockItem", "gtk-paste"),
        MenuEntry("/Edit/_Delete", None, "edit_delete", "StockItem", "gtk-delete"),
        MenuEntry("/Edit/---", kind="Separator"),
        MenuEntry("/Edit/Select _All", "<control>A", "edit_select_all"),
        MenuEntry("/_View", kind="Branch"),
        MenuEntry("/View/_Fullscreen", "F11", "view_fullscreen", "CheckItem"),
        MenuEntry("/_Search", kind="Branch"),
        MenuEntry("/Search/_Find...", "<control>F", "search_find", "StockItem", "gtk-find"),
        MenuEntry("/Search/Find _Next", "<control>G", "search_find_next"),
        MenuEntry("/Search/Find _Previous", "<shift><control>G", "search_find_previous"),
        MenuEntry("/Search/_Replace...", "<control>H", "search_replace",
                  "StockItem", "gtk-find-and-replace"),
        MenuEntry("/Search/---", kind="Separator"),
        MenuEntry("/Search/_Jump To...", "<control>J", "search_jump_to",
                  "StockItem", "gtk-jump-to"),
        MenuEntry("/_Options", kind="Branch"),
        MenuEntry("/Options/_Font...", None, "option_font", "StockItem", "gtk-select-font"),
        MenuEntry("/Options/_Word Wrap", None, "option_word_wrap", "CheckItem"),
        MenuEntry("/Options/_Line Numbers", None, "option_line_numbers", "CheckItem"),
        MenuEntry("/Options/---", kind="Separator"),
        MenuEntry("/Options/_Auto Indent", None, "option_auto_indent", "CheckItem"),
        MenuEntry("/_Help", kind="Branch"),
        MenuEntry("/Help/_About", None, "help_about", "StockItem", "gtk-about"),
    ]
    return entries


def find_entry(entries: Iterable[MenuEntry], path: str) -> MenuEntry:
    """Entry for a path, with or without mnemonic underscores."""
    key = _strip(path)
    for entry in entries:
        if entry.key == key:
            return entry
    raise KeyError(path)


class MenuState:
    """Which menu items can currently be activated."""

    def __init__(self, entries: Sequence[MenuEntry]) -> None:
        self.entries = list(entries)
        self._sensitive = {
            entry.key: True for entry in self.entries if entry.kind != "Separator"
        }
        for path in _INITIALLY_DISABLED:
            self._set(path, False)
        self.from_selection_bound(False)

    def _set(self, path: str, value: bool) -> None:
        key = _strip(path)
        if key in self._sensitive:
            self._sensitive[key] = bool(value)

    def from_modified_flag(self, modified: bool) -> None:
        """Saving is offered only when there is something to save."""
        self._set("/File/Save", modified)

    def from_selection_bound(self, has_selection: bool) -> None:
        """Cut, copy and delete need a selection."""
        for path in _SELECTION_ITEMS:
            self._set(path, has_selection)

    def from_clipboard(self, has_text: bool) -> None:
        """Paste needs text on the clipboard."""
        self._set("/Edit/Paste", has_text)

    def is_sensitive(self, path: str) -> bool:
        key = _strip(path)
        try:
            return self._sensitive[key]
        except KeyError:
            raise KeyError(path) from None