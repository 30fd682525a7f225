"""Helpers for reading upload content from a path or from standard input."""

from __future__ import annotations

import io
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO

_WHENCE_VALUES = (io.SEEK_SET, io.SEEK_CUR, io.SEEK_END)


class EmptyFile(io.RawIOBase):
    """A readable, seekable stream with no content."""

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def _ensure_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    def readinto(self, buffer) -> int:
        self._ensure_open()
        return 0

    def read(self, size: int = -1) -> bytes:
        self._ensure_open()
        if size is not None and not isinstance(size, int):
            raise TypeError(f"size must be an integer, not {type(size).__name__}")
        return b""

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._ensure_open()
        if whence not in _WHENCE_VALUES:
            raise ValueError(f"invalid whence ({whence}, should be 0, 1 or 2)")
        if whence == io.SEEK_SET and offset < 0:
            raise ValueError(f"negative seek position {offset}")
        return 0


def stdin_to_file() -> Path:
    """Copy standard input into a new temporary file and return its path.

    The caller owns the file and should delete it when done.
    """
    source = getattr(sys.stdin, "buffer", sys.stdin)
    fd, name = tempfile.mkstemp()
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as out:
            shutil.copyfileobj(source, out)
    except BaseException:
        path.unlink(missing_ok=True)
        raise
    return path


def open_file(path: os.PathLike | str | None = None) -> tuple[BinaryIO, Path]:
    """Open a file for reading, or standard input when no path is given."""
    if path is not None:
        path = Path(path)
        return open(path, "rb"), path

    tmp_path = stdin_to_file()
    handle = open(tmp_path, "rb")
    try:
        tmp_path.unlink()
    except OSError:
        pass
    return handle, tmp_path