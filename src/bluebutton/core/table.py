"""
bluebutton.core.table - Fixed-width table decoding.

Column boundaries are taken from where each label sits in the header line;
every following row is sliced at those same offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from bluebutton.core.models import Item
from bluebutton.core.patterns import clean_value


def column_offsets(header: str, columns: Sequence[str]) -> List[int]:
    """Start offset of each column label within the header line."""
    return [header.find(column) for column in columns]


def parse_table_line(line: str, columns: Sequence[str], offsets: Sequence[int]) -> Item:
    """
    Slice one table row into column values.

    Args:
        line: Table row
        columns: Column labels (used as the item keys)
        offsets: Start offset of each column

    Returns:
        Item mapping each column to its trimmed cell, or None if blank
    """
    row: Item = {}
    last = len(offsets) - 1
    for index, column in enumerate(columns):
        start = offsets[index]
        finish = len(line) if index == last else offsets[index + 1]
        row[column] = clean_value(line[start:finish])
    return row


@dataclass(frozen=True)
class TableLayout:
    """Column labels plus the offsets measured from one header line."""

    columns: Tuple[str, ...]
    offsets: Tuple[int, ...]

    @classmethod
    def from_header(cls, header: str, columns: Sequence[str]) -> "TableLayout":
        return cls(columns=tuple(columns), offsets=tuple(column_offsets(header, columns)))

    def decode(self, line: str) -> Item:
        return parse_table_line(line, self.columns, self.offsets)
