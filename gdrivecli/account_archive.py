"""Tar archives holding one account's configuration directory."""

from __future__ import annotations

import os
import tarfile
from pathlib import Path, PurePosixPath

_EXTRACT_KWARGS = {"filter": "data"} if hasattr(tarfile, "data_filter") else {}


class ArchiveError(Exception):
    """Raised when an account archive cannot be created, read or unpacked."""


def _require_exists(path: Path) -> None:
    if not path.exists():
        raise ArchiveError(f"'{path}' does not exist")


def create(src_path: os.PathLike | str, archive_path: os.PathLike | str) -> None:
    """Pack the directory at src_path into a new tar archive."""
    src_path = Path(src_path)
    archive_path = Path(archive_path)
    _require_exists(src_path)
    if not src_path.is_dir():
        raise ArchiveError(f"'{src_path}' is not a directory")
    if archive_path.exists():
        raise ArchiveError(f"'{archive_path}' already exists")

    try:
        handle = open(archive_path, "wb")
    except OSError as err:
        raise ArchiveError(f"Failed to create file: {err}") from err

    with handle:
        tar = tarfile.open(fileobj=handle, mode="w", dereference=True)
        try:
            tar.add(src_path, arcname=src_path.name)
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to add {src_path} to archive: {err}") from err
        try:
            tar.close()
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to create archive '{archive_path}': {err}") from err


def _safe_members(tar: tarfile.TarFile) -> list[tarfile.TarInfo]:
    members = []
    for member in tar.getmembers():
        parts = [part for part in PurePosixPath(member.name).parts if part != "/"]
        if not parts or ".." in parts:
            continue
        member.name = str(PurePosixPath(*parts))
        members.append(member)
    return members


def unpack(archive_path: os.PathLike | str, dst_path: os.PathLike | str) -> None:
    """Extract an archive into dst_path, skipping entries that would escape it."""
    archive_path = Path(archive_path)
    dst_path = Path(dst_path)
    _require_exists(archive_path)
    _require_exists(dst_path)

    try:
        handle = open(archive_path, "rb")
    except OSError as err:
        raise ArchiveError(f"Failed to open archive: {err}") from err

    with handle:
        try:
            with tarfile.open(fileobj=handle, mode="r") as tar:
                tar.extractall(dst_path, members=_safe_members(tar), **_EXTRACT_KWARGS)
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to unpack archive: {err}") from err


def get_account_name(archive_path: os.PathLike | str) -> str:
    """Return the name of the single directory stored in the archive."""
    try:
        handle = open(archive_path, "rb")
    except OSError as err:
        raise ArchiveError(f"Failed to open archive: {err}") from err

    with handle:
        try:
            with tarfile.open(fileobj=handle, mode="r") as tar:
                members = tar.getmembers()
        except (OSError, tarfile.TarError) as err:
            raise ArchiveError(f"Failed to read archive entries: {err}") from err

    dir_names = [
        name
        for name in (PurePosixPath(m.name).name for m in members if m.isdir())
        if name not in ("", "..")
    ]

    if not dir_names:
        raise ArchiveError("Archive contains no directories")
    if len(dir_names) > 1:
        raise ArchiveError("Archive contains multiple directories")
    return dir_names[0]