"""Command line entry point: options, settings and opening the document."""

from __future__ import annotations

import argparse
import locale
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional
from urllib.parse import unquote, urlparse

from .buffer import TextBuffer
from .config import PACKAGE, VERSION, load_config
from .history import read_stdin
from .linenum import LineNumberGutter
from .search import jump_to_line
from .selector import UTF8, FileInfo, is_supported_charset
from .window import MainWindow

PACKAGE_STRING = f"{PACKAGE} {VERSION}"


class UsageError(ValueError):
    """Raised for command lines that cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


@dataclass
class Options:
    """What the command line asked for."""

    filename: Optional[str] = None
    charset: Optional[str] = None
    charset_flag: bool = False
    tab_width: int = 0
    jump: int = 0
    show_version: bool = False


def _parse_file_uri(arg: str) -> str:
    if arg.startswith("file://"):
        return unquote(urlparse(arg).path)
    return arg


def _default_charset() -> str:
    return locale.getpreferredencoding(False) or UTF8


def _needs_manual_flag(
    charset: str, default_charset: str, encoding_items: Iterable[Optional[str]] = ()
) -> bool:
    wanted = charset.casefold()
    if wanted in (default_charset.casefold(), UTF8.casefold()):
        return False
    return not any(item and item.casefold() == wanted for item in encoding_items)


def _build_parser() -> _Parser:
    parser = _Parser(prog=PACKAGE, usage=f"{PACKAGE} [OPTION...] [filename]")
    parser.add_argument("--codeset", metavar="CODESET", help="Set codeset to open file")
    parser.add_argument("--tab-width", type=int, default=0, metavar="WIDTH",
                        help="Set tab width")
    parser.add_argument("--jump", type=int, default=0, metavar="LINENUM",
                        help="Jump to specified line")
    parser.add_argument("--version", action="store_true", help="Show version number")
    parser.add_argument("files", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Parse command-line arguments; raises UsageError on bad input.

    An unsupported codeset is ignored.  Only the first file name is used.
    """
    args = _build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    options = Options(tab_width=args.tab_width, jump=args.jump,
                      show_version=args.version)
    if args.codeset and is_supported_charset(args.codeset):
        options.charset = args.codeset
    if options.charset:
        options.charset_flag = _needs_manual_flag(options.charset, _default_charset())
    if args.files:
        options.filename = _parse_file_uri(args.files[0])
    return options


def _read_document(info: FileInfo) -> str:
    try:
        with open(info.filename, encoding=info.charset or UTF8, errors="replace") as stream:
            return stream.read()
    except FileNotFoundError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Open the document named on the command line and report its state."""
    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(f"{PACKAGE}: {exc}")
        return 255
    if options.show_version:
        print(PACKAGE_STRING)
        return 0

    info = FileInfo(filename=options.filename, charset=options.charset,
                    charset_flag=options.charset_flag)
    config = load_config()
    buffer = TextBuffer()
    window = MainWindow(buffer, info.filename)
    gutter = LineNumberGutter(char_width=1)
    gutter.show(config.linenumbers)

    if info.filename:
        try:
            text = _read_document(info)
        except OSError as exc:
            print(f"{PACKAGE}: can't open file - {info.filename}: {exc.strerror}")
            return 1
    else:
        text = read_stdin() or ""
    if text:
        buffer.insert(0, text)
        buffer.place_cursor(0)
    buffer.modified = False

    if options.jump:
        jump_to_line(buffer, options.jump)

    line = buffer.line_of_offset(buffer.cursor) + 1
    print(f"{window.title()}\t{buffer.line_count()} lines\tline {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())