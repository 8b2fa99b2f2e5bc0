"""Core of a plain-text editor: buffer, undo, search, line numbers, menus, charsets and settings."""

__version__ = "0.8.17"