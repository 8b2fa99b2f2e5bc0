# leafedit

The working core of a small plain-text editor, written without any GUI
toolkit. It needs nothing beyond the standard library.

## Modules

- `leafedit.buffer`: `TextBuffer`, text with an insert mark, a selection bound,
  a modified flag, line lookups (`line_count`, `line_of_offset`,
  `offset_of_line`) and change events registered with `connect`
  (`insert-text`, `delete-range`, `begin-user-action`, `end-user-action`,
  `modified-changed`, `mark-set`). `KeyTracker` remembers the last key pressed
  (values from the `Key` enum), flagging keys typed with Control held.
  `selection_has_newline` tells whether a selection spans several lines.
- `leafedit.undo`: `UndoManager` records changes made inside user actions
  (between `begin_user_action` and `end_user_action`), merges runs of single
  characters typed, erased or deleted with the same key into one `UndoInfo`
  record, and undoes or redoes linked groups of records with `undo` and `redo`.
  It also keeps the buffer's modified flag in step with the saved position.
- `leafedit.search`: `find_all` lists every match of a pattern, optionally
  ignoring case. `Searcher` selects the next or previous match with
  wrap-around, highlights matches, replaces them one by one (through a
  confirm callback) or all at once, and keeps find and replace histories.
  `jump_to_line` moves the cursor to a one-based line.
- `leafedit.linenum`: `LineNumberGutter` works out the width of the
  line-number border and which labels to paint; `visible_lines` picks the lines
  between two y coordinates.
- `leafedit.menu`: `build_menu` gives the menu bar entries (`MenuEntry`),
  `find_entry` looks one up by path, and `MenuState` tracks which items are
  usable depending on the modified flag, the selection and the clipboard.
- `leafedit.selector`: `FileInfo`, `LineEnd` and `DialogMode`, plus
  `CharsetMenu`, the character-coding choices offered when opening or saving
  (`charset_table`, `is_supported_charset`, `normalize_selected_path`).
- `leafedit.window`: `MainWindow` tracks the window title (a star marks a
  modified buffer), whether saving is worthwhile, and fullscreen;
  `file_basename` and `window_title` build the title.
- `leafedit.config`: `Config`, `config_path`, `load_config` and `save_config`
  for the settings file (window size, font, word wrap, line numbers, auto
  indent), kept under `$XDG_CONFIG_HOME/leafedit/leafeditrc` or
  `~/.config/leafedit/leafeditrc`.
- `leafedit.history`: `update_history` moves an entry to the front of a
  history list; `read_stdin` reads text waiting on standard input.
- `leafedit.pkgint`: `PackedInts` and `pack4`, `pack8`, `pack16`, for tables of
  4-, 8- or 16-bit units packed into 32-bit words.
- `leafedit.cli`: `parse_args` (returning `Options`) and `main`.

## Install

    pip install .

## Command line

    leafedit [--codeset=CODESET] [--tab-width=WIDTH] [--jump=LINENUM] [--version] [filename]

`--version` prints `leafedit 0.8.17`. Otherwise the command reads the settings
file, loads the named file (a `file://` URI is accepted) or, with no file
name, whatever is piped on standard input, moves to the `--jump` line if
given, and prints one line: the window title, the number of lines and the
cursor's line, separated by tabs. An unsupported `--codeset` is ignored.
`--tab-width` is parsed into `Options.tab_width` but has no effect on the
output. A command line that cannot be parsed prints an error and exits
with status 255.

## Example

    from leafedit.buffer import TextBuffer, KeyTracker
    from leafedit.undo import UndoManager
    from leafedit.search import Searcher

    buf = TextBuffer("hello")
    undo = UndoManager(buf, KeyTracker())

    buf.begin_user_action()
    buf.insert(5, " world")
    buf.end_user_action()

    assert undo.undo() == 1
    assert buf.text == "hello"

    searcher = Searcher(buf, undo)
    assert searcher.submit("ell") == (1, 4)

## What it does not do

There is no editing window: the package has no screen, no key handling
loop, no file dialogs and no printing. The command does not edit or save
documents; it only loads one and reports on it. Character codings are not
detected automatically, and font names are stored in the settings but never
applied.

## Tests

    pip install .[test]
    pytest