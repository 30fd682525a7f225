"""A local directory tree with a Drive id assigned to every folder and file."""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

from gdrivecli.file_info import FileInfo

_DEFAULT_MIME_TYPE = "application/octet-stream"


class FileTreeError(Exception):
    """Raised when a directory tree cannot be read."""


def _next_id(ids: Iterator[str]) -> str:
    try:
        return next(ids)
    except StopIteration:
        raise FileTreeError("Error getting id: No more id's available") from None


def _name_of(path: Path) -> str:
    name = path.name
    if not name or name == "..":
        raise FileTreeError(f"Invalid path: {path}")
    return name


def _root_of(folder: Folder) -> Folder:
    while folder.parent is not None:
        folder = folder.parent
    return folder


@dataclass(frozen=True)
class TreeInfo:
    file_count: int
    folder_count: int
    total_file_size: int


@dataclass(eq=False)
class Folder:
    """A local directory; `ids` is an iterator handing out Drive ids."""

    name: str
    path: Path
    drive_id: str
    parent: Folder | None = field(default=None, repr=False)
    children: list[Union[Folder, File]] = field(default_factory=list, repr=False)

    @staticmethod
    def from_path(path: os.PathLike | str, parent: Folder | None, ids: Iterator[str]) -> Folder:
        path = Path(path)
        folder = Folder(name=_name_of(path), path=path, drive_id=_next_id(ids), parent=parent)

        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError as err:
            raise FileTreeError(f"Error reading directory: '{err}'") from err

        for entry in entries:
            if entry.is_dir():
                folder.children.append(Folder.from_path(entry, folder, ids))
            elif entry.is_file():
                folder.children.append(File.from_path(entry, folder, ids))
            else:
                raise FileTreeError(f"Unknown file type: {entry}")

        return folder

    def files(self) -> list[File]:
        """The files directly inside this folder, sorted by name."""
        return sorted(
            (child for child in self.children if isinstance(child, File)),
            key=lambda file: file.name,
        )

    def relative_path(self) -> Path:
        """Path relative to the directory that holds the root folder."""
        return self.path.relative_to(_root_of(self).path.parent)

    def folders_recursive(self) -> list[Folder]:
        """All folders below this one, depth first."""
        folders: list[Folder] = []
        for child in self.children:
            if isinstance(child, Folder):
                folders.append(child)
                folders.extend(child.folders_recursive())
        return folders

    def ancestor_count(self) -> int:
        count = 0
        parent = self.parent
        while parent is not None:
            count += 1
            parent = parent.parent
        return count


@dataclass(eq=False)
class File:
    """A regular local file inside a Folder."""

    name: str
    path: Path
    size: int
    mime_type: str
    drive_id: str
    parent: Folder = field(repr=False)

    @staticmethod
    def from_path(path: os.PathLike | str, parent: Folder, ids: Iterator[str]) -> File:
        path = Path(path)
        name = _name_of(path)
        try:
            with open(path, "rb") as handle:
                size = os.fstat(handle.fileno()).st_size
        except OSError as err:
            raise FileTreeError(f"Failed to open file '{path}': {err}") from err
        mime_type = mimetypes.guess_type(name)[0] or _DEFAULT_MIME_TYPE
        return File(
            name=name,
            path=path,
            size=size,
            mime_type=mime_type,
            drive_id=_next_id(ids),
            parent=parent,
        )

    def relative_path(self) -> Path:
        """Path relative to the directory that holds the root folder."""
        return self.path.relative_to(_root_of(self.parent).path.parent)

    def info(self, parents: list[str] | None) -> FileInfo:
        return FileInfo(name=self.name, mime_type=self.mime_type, parents=parents, size=self.size)


@dataclass(eq=False)
class FileTree:
    root: Folder

    @staticmethod
    def from_path(path: os.PathLike | str, ids: Iterator[str]) -> FileTree:
        path = Path(path)
        try:
            canonical = path.resolve(strict=True)
        except (OSError, RuntimeError) as err:
            raise FileTreeError(f"Failed to get canonical path of {path}: {err}") from err
        return FileTree(Folder.from_path(canonical, None, ids))

    def folders(self) -> list[Folder]:
        """Every folder, shallowest first, then by name."""
        folders = [self.root, *self.root.folders_recursive()]
        return sorted(folders, key=lambda folder: (folder.ancestor_count(), folder.name))

    def info(self) -> TreeInfo:
        folders = self.folders()
        files = [file for folder in folders for file in folder.files()]
        return TreeInfo(
            file_count=len(files),
            folder_count=len(folders),
            total_file_size=sum(file.size for file in files),
        )