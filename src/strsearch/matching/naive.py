"""Brute-force matcher: try every alignment, compare left to right.

O(n * m) comparisons in the worst case and no precomputation. This is
the oracle the other matchers are checked against.
"""
from __future__ import annotations

from strsearch.matching.result import Algorithm, MatchResult


def naive_search(pattern: str, text: str) -> MatchResult:
    m = len(pattern)
    found: list[int] = []
    comparisons = 0
    for i in range(len(text) - m + 1):
        for j in range(m):
            comparisons += 1
            if pattern[j] != text[i + j]:
                break
        else:
            found.append(i)
    return MatchResult(
        algorithm=Algorithm.NAIVE,
        match_indices=tuple(found),
        comparison_count=comparisons,
    )
