"""Persistent editor settings: window size, font and view options."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

PACKAGE = "leafedit"
VERSION = "0.8.17"

_MIN_MINOR = 8
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Config:
    """Settings restored when the editor starts."""

    width: int = 600
    height: int = 400
    fontname: str = "Monospace 12"
    wordwrap: bool = False
    linenumbers: bool = False
    autoindent: bool = False


def _atoi(text: str) -> int:
    """Leading integer of a string, or 0 when it does not start with one."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def config_path(base: str | os.PathLike | None = None) -> Path:
    """Location of the settings file under a configuration directory.

    Without a base, the user's configuration directory is used.
    """
    if base is None:
        base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
            os.path.expanduser("~"), ".config"
        )
    return Path(base) / PACKAGE / f"{PACKAGE}rc"


def _version_accepted(line: str) -> bool:
    parts = line.strip().split(".", 2)
    if len(parts) < 3:
        return False
    return _atoi(parts[1]) >= _MIN_MINOR and _atoi(parts[2]) >= 0


def load_config(path: str | os.PathLike | None = None) -> Config:
    """Read settings from a file; missing files and old versions give defaults."""
    config = Config()
    target = config_path() if path is None else Path(path)
    try:
        with open(target, encoding="utf-8", errors="replace") as stream:
            lines = stream.read().splitlines()
    except OSError:
        return config
    if not lines or not _version_accepted(lines[0]):
        return config

    values = iter(lines[1:])
    for name in ("width", "height", "fontname", "wordwrap", "linenumbers", "autoindent"):
        try:
            raw = next(values)
        except StopIteration:
            break
        if name == "fontname":
            config.fontname = raw
        elif name in ("width", "height"):
            setattr(config, name, _atoi(raw))
        else:
            setattr(config, name, bool(_atoi(raw)))
    return config


def save_config(
    config: Config,
    path: str | os.PathLike | None = None,
    version: str = VERSION,
) -> Path:
    """Write settings to a file, creating its directory; return the file's path.

    Raises OSError when the file cannot be written.
    """
    target = config_path() if path is None else Path(path)
    if not target.parent.is_dir():
        target.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    lines = [
        version,
        str(int(config.width)),
        str(int(config.height)),
        config.fontname,
        str(int(bool(config.wordwrap))),
        str(int(bool(config.linenumbers))),
        str(int(bool(config.autoindent))),
    ]
    try:
        with open(target, "w", encoding="utf-8") as stream:
            stream.write("".join(f"{line}\n" for line in lines))
    except OSError as exc:
        raise OSError(f"{PACKAGE}: can't save config file - {target}") from exc
    return target