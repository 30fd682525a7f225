"""Plain-text tables aligned into columns."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from itertools import islice, takewhile
from typing import Sequence, TextIO

_MIN_WIDTH = 2
_PADDING = 3


@dataclass
class Table:
    """A header row and value rows, all with the same number of columns."""

    header: Sequence[object]
    values: list[Sequence[object]] = field(default_factory=list)

    def __post_init__(self) -> None:
        columns = len(self.header)
        for row in self.values:
            if len(row) != columns:
                raise ValueError(
                    f"row has {len(row)} columns, header has {columns}: {list(row)!r}"
                )


@dataclass
class DisplayConfig:
    skip_header: bool = False
    separator: str = "\t"


def _display_width(text: str) -> int:
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _cell_widths(rows: list[list[str]]) -> list[list[int]]:
    widths: list[list[int]] = [[] for _ in rows]
    for i, row in enumerate(rows):
        for col in range(len(widths[i]), len(row) - 1):
            block = list(takewhile(lambda line: col + 1 < len(line), islice(rows, i, None)))
            width = max(
                [_MIN_WIDTH] + [_display_width(line[col]) + _PADDING for line in block]
            )
            for line_widths in widths[i : i + len(block)]:
                line_widths.append(width)
    return widths


def write(writer: TextIO, table: Table, config: DisplayConfig) -> None:
    """Write the table to a text stream, aligning tab-separated columns."""
    rows_text = [] if config.skip_header else [config.separator.join(map(str, table.header))]
    rows_text.extend(config.separator.join(map(str, row)) for row in table.values)

    rows = [line.split("\t") for text in rows_text for line in text.split("\n")]

    for cells, widths in zip(rows, _cell_widths(rows)):
        padded = [
            cell + " " * (widths[j] - _display_width(cell)) if j < len(widths) else cell
            for j, cell in enumerate(cells)
        ]
        writer.write("".join(padded) + "\n")

    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()