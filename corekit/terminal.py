"""Terminal size lookup."""

from __future__ import annotations

import io
import os
from typing import IO, Any

__all__ = ["terminal_size"]


def _file_descriptor(stream: IO[Any]) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, io.UnsupportedOperation, OSError, ValueError):
        return None


def terminal_size(stream: IO[Any]) -> tuple[int, int]:
    """Return the width and height of the terminal behind ``stream``.

    Raises OSError when the stream is not a terminal or its size cannot be read.
    """
    fd = _file_descriptor(stream)
    if fd is None or not os.isatty(fd):
        raise OSError("given writer is no terminal")
    size = os.get_terminal_size(fd)
    return size.columns, size.lines