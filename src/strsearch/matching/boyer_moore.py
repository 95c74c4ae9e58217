"""Boyer-Moore matcher using the bad-character rule only.

The pattern is compared right to left at each alignment i. On a
mismatch at pattern index j against text unit c:

    - if c's last occurrence in the pattern lies left of j (or c is
      absent, -1), shift so that occurrence lines up with c:
      i += j - last(c)
    - otherwise the occurrence is right of j and aligning it would
      move backwards, so shift by one.

Only matching comparisons are counted; the comparison that ends an
alignment is not.
"""
from __future__ import annotations

from types import MappingProxyType

from strsearch.matching.last_occurrence import (
    build_last_occurrence_table,
    last_occurrence,
)
from strsearch.matching.result import Algorithm, MatchResult


def boyer_moore_search(pattern: str, text: str) -> MatchResult:
    m = len(pattern)
    last_index = len(text) - m
    table = build_last_occurrence_table(pattern)
    found: list[int] = []
    comparisons = 0

    i = 0
    while i <= last_index:
        j = m - 1
        while j >= 0 and text[i + j] == pattern[j]:
            comparisons += 1
            j -= 1
        if j == -1:
            found.append(i)
            i += 1
        else:
            shift = last_occurrence(table, text[i + j])
            if shift < j:
                i += j - shift
            else:
                i += 1

    return MatchResult(
        algorithm=Algorithm.BOYER_MOORE,
        match_indices=tuple(found),
        comparison_count=comparisons,
        last_occurrence_table=MappingProxyType(table),
    )
