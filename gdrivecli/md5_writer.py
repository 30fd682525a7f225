"""A writer wrapper that computes the MD5 digest of what it passes on."""

from __future__ import annotations

import hashlib
from typing import BinaryIO


class Md5Writer:
    """Forward writes to a binary stream and hash the bytes it accepted."""

    def __init__(self, writer: BinaryIO) -> None:
        self._writer = writer
        self._hash = hashlib.md5()

    def write(self, data: bytes) -> int:
        written = self._writer.write(data)
        if written is None:
            written = len(data)
        self._hash.update(memoryview(data)[:written])
        return written

    def flush(self) -> None:
        self._writer.flush()

    def md5(self) -> str:
        """Hex digest of all bytes written so far."""
        return self._hash.hexdigest()