"""Boyer-Moore bad-character (last occurrence) table."""
from __future__ import annotations

from collections.abc import Mapping

from strsearch.matching.alphabet import CharUnit

NOT_IN_PATTERN = -1


def build_last_occurrence_table(pattern: str) -> dict[CharUnit, int]:
    """Map each unit of `pattern` to the rightmost index where it occurs.

    Later occurrences overwrite earlier ones. Keys keep the order in
    which each unit first appears in the pattern.
    """
    table: dict[CharUnit, int] = {}
    for index, unit in enumerate(pattern):
        table[unit] = index
    return table


def last_occurrence(table: Mapping[CharUnit, int], unit: CharUnit) -> int:
    """Rightmost pattern index of `unit`, or -1 when it never occurs."""
    return table.get(unit, NOT_IN_PATTERN)
