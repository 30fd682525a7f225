"""Path normalisation that keeps relative paths from climbing upwards."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


def sanitize_path(path: os.PathLike | str) -> Path:
    """Resolve '.' and '..' lexically; '..' never climbs above the start."""
    pure = PurePath(path)
    parts: list[str] = []
    rooted = False

    for part in pure.parts:
        if part == pure.anchor:
            if pure.root:
                parts = []
                rooted = True
        elif part == "..":
            if parts:
                parts.pop()
        elif part != ".":
            parts.append(part)

    if rooted:
        return Path(pure.root, *parts)
    return Path(*parts)