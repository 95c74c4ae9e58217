"""Rabin-Karp matcher over the base-113 rolling hash.

Each window's hash is compared with the pattern's hash; only on
equality are the characters checked one by one. Equal hashes alone
never count as a match: distinct windows can collide, both because
unit values exceed the base and because the hash wraps at 32 bits.
Only those verification comparisons are counted.
"""
from __future__ import annotations

from strsearch.matching.result import Algorithm, MatchResult
from strsearch.matching.rolling_hash import RollingHash, initial_hash


def _verify(pattern: str, text: str, start: int) -> tuple[bool, int]:
    """Compare pattern against text[start:], return (matched, comparisons)."""
    comparisons = 0
    for offset, unit in enumerate(pattern):
        comparisons += 1
        if text[start + offset] != unit:
            return False, comparisons
    return True, comparisons


def rabin_karp_search(pattern: str, text: str) -> MatchResult:
    m = len(pattern)
    pattern_hash = initial_hash(pattern)
    window = RollingHash(text[:m])
    found: list[int] = []
    comparisons = 0

    for i in range(len(text) - m + 1):
        if i > 0:
            window.roll(text[i - 1], text[i + m - 1])
        if window.value != pattern_hash:
            continue
        matched, cost = _verify(pattern, text, i)
        comparisons += cost
        if matched:
            found.append(i)

    return MatchResult(
        algorithm=Algorithm.RABIN_KARP,
        match_indices=tuple(found),
        comparison_count=comparisons,
        pattern_hash=pattern_hash,
    )
