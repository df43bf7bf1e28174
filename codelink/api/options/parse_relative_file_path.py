"""Relative file path check for the positional info-string argument."""

from pathlib import PurePosixPath, PureWindowsPath

_INVALID_CHARS = frozenset('<>|?*\0')


def parse_relative_file_path(text: str) -> str | None:
    """Return ``text`` when it reads as a relative file path, else None."""
    if not text or any(ch in _INVALID_CHARS for ch in text):
        return None
    if text.endswith(("/", "\\")):
        return None
    if PurePosixPath(text.replace("\\", "/")).is_absolute() or PureWindowsPath(text).drive:
        return None
    return text
