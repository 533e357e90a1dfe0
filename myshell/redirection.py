"""Opening files for standard input and output redirection."""

from __future__ import annotations

import os
from typing import BinaryIO

_OUTPUT_MODE = 0o644


class RedirectionError(OSError):
    """A redirection target could not be opened."""


def open_input(filename: str) -> BinaryIO | None:
    """Open filename for reading as a command's standard input.

    An empty filename means no redirection and gives None.
    """
    if not filename:
        return None
    try:
        fd = os.open(filename, os.O_RDONLY)
    except OSError as exc:
        raise RedirectionError(
            exc.errno,
            f"Cannot open input file '{filename}': {os.strerror(exc.errno or 0)}",
            filename,
        ) from exc
    return os.fdopen(fd, "rb")


def open_output(filename: str, append: bool) -> BinaryIO | None:
    """Open filename for writing as a command's standard output.

    The file is created with mode 0644 if missing, then appended to or
    truncated. An empty filename means no redirection and gives None.
    """
    if not filename:
        return None
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(filename, flags, _OUTPUT_MODE)
    except OSError as exc:
        raise RedirectionError(
            exc.errno,
            f"Cannot open output file '{filename}': {os.strerror(exc.errno or 0)}",
            filename,
        ) from exc
    return os.fdopen(fd, "ab" if append else "wb")