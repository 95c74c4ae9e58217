"""Search algorithms and the result bundle every search returns."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from strsearch.matching.alphabet import CharUnit


class Algorithm(Enum):
    NAIVE = "naive"
    KMP = "kmp"
    BOYER_MOORE = "boyer-moore"
    RABIN_KARP = "rabin-karp"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Algorithm.NAIVE: "Naive (brute-force)",
    Algorithm.KMP: "Knuth-Morris-Pratt",
    Algorithm.BOYER_MOORE: "Boyer-Moore",
    Algorithm.RABIN_KARP: "Rabin-Karp",
}


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of one search call.

    match_indices are ascending code-unit offsets into the text where
    the whole pattern matches. Exactly one of the diagnostic fields
    is set, depending on the algorithm:

        KMP          -> failure_table
        Boyer-Moore  -> last_occurrence_table
        Rabin-Karp   -> pattern_hash
        Naive        -> none
    """
    algorithm: Algorithm
    match_indices: tuple[int, ...]
    comparison_count: int
    failure_table: tuple[int, ...] | None = None
    # Mappings are unhashable; equality still compares the table.
    last_occurrence_table: Mapping[CharUnit, int] | None = field(default=None, hash=False)
    pattern_hash: int | None = None

    @property
    def match_count(self) -> int:
        return len(self.match_indices)

    @property
    def found(self) -> bool:
        return bool(self.match_indices)
