"""Metadata describing a local file about to be uploaded."""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Any

DEFAULT_MIME_TYPE = "application/octet-stream"


class InvalidFilePathError(ValueError):
    """Raised when a path does not end in a file name."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid file path: {self.path}")


def _guess_mime_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


def _file_size(file: IO[Any]) -> int:
    try:
        return os.fstat(file.fileno()).st_size
    except (OSError, AttributeError, ValueError):
        return 0


@dataclass(frozen=True)
class FileInfoConfig:
    """Where a file lives and what to override when describing it."""

    file_path: Path
    mime_type: str | None = None
    parents: list[str] | None = None


@dataclass(frozen=True)
class FileInfo:
    """Name, MIME type, parent folders and size of a file."""

    name: str
    mime_type: str
    parents: list[str] | None
    size: int

    @staticmethod
    def from_file(file: IO[Any], config: FileInfoConfig) -> FileInfo:
        """Describe an open file; the MIME type is guessed from its name if not given."""
        path = Path(config.file_path)
        name = path.name
        if not name or name == "..":
            raise InvalidFilePathError(path)

        mime_type = config.mime_type or _guess_mime_type(path)
        parents = list(config.parents) if config.parents is not None else None
        return FileInfo(name=name, mime_type=mime_type, parents=parents, size=_file_size(file))