"""Knuth-Morris-Pratt matcher.

Two cursors scan the input: k over the text, j over the pattern. The
text cursor never moves backwards. On a mismatch after j > 0 matched
characters, j falls back to failure_table[j - 1] and the same text
character is compared again on the next iteration. Every iteration of
the scan loop is one comparison; the fallback itself costs nothing.

After a full match, j also falls back through the table, so
overlapping occurrences are reported ("aa" in "aaaa" -> 0, 1, 2).
"""
from __future__ import annotations

from strsearch.matching.failure_table import build_failure_table
from strsearch.matching.result import Algorithm, MatchResult


def kmp_search(pattern: str, text: str) -> MatchResult:
    n = len(text)
    m = len(pattern)
    failure_table = build_failure_table(pattern)
    found: list[int] = []
    comparisons = 0
    j = 0
    k = 0

    while k < n:
        comparisons += 1
        if pattern[j] == text[k]:
            j += 1
            k += 1
            if j == m:
                found.append(k - j)
                j = failure_table[j - 1]
        elif j == 0:
            k += 1
            # Fewer than m characters left: no alignment can still match.
            if n - k < m:
                break
        else:
            j = failure_table[j - 1]

    return MatchResult(
        algorithm=Algorithm.KMP,
        match_indices=tuple(found),
        comparison_count=comparisons,
        failure_table=failure_table,
    )
