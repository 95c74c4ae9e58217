"""Search entry points: validate, convert to code units, dispatch.

Usage:
    result = search("kmp", "aba", "abababa")
    result.match_indices      # (0, 2, 4)
    result.failure_table      # (0, 0, 1)

    results = search_all("aba", "abababa")
    results[Algorithm.NAIVE].match_indices == results[Algorithm.KMP].match_indices

Every call is independent: tables and counters are built inside the
matcher and nothing is cached between calls.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from strsearch.matching.alphabet import to_code_units
from strsearch.matching.boyer_moore import boyer_moore_search
from strsearch.matching.kmp import kmp_search
from strsearch.matching.naive import naive_search
from strsearch.matching.rabin_karp import rabin_karp_search
from strsearch.matching.result import Algorithm, MatchResult
from strsearch.matching.validation import InvalidInputError, validate

log = logging.getLogger(__name__)

Matcher = Callable[[str, str], MatchResult]

MATCHERS: dict[Algorithm, Matcher] = {
    Algorithm.NAIVE: naive_search,
    Algorithm.KMP: kmp_search,
    Algorithm.BOYER_MOORE: boyer_moore_search,
    Algorithm.RABIN_KARP: rabin_karp_search,
}


def _prepare(pattern: str | None, text: str | None) -> tuple[str, str]:
    pattern_units = to_code_units(pattern) if pattern else ""
    text_units = to_code_units(text) if text else ""
    try:
        validate(pattern_units, text_units)
    except InvalidInputError as exc:
        log.debug("Rejected input (%s): pattern=%d text=%d units",
                  exc.kind.name, len(pattern_units), len(text_units))
        raise
    return pattern_units, text_units


def search(
    algorithm: Algorithm | str,
    pattern: str | None,
    text: str | None,
) -> MatchResult:
    """Find every occurrence of `pattern` in `text` with one algorithm.

    `algorithm` is an Algorithm or its value ("naive", "kmp",
    "boyer-moore", "rabin-karp"); anything else raises ValueError.
    Raises InvalidInputError before any matching work when either
    string is empty or the pattern is longer than the text.
    """
    algorithm = Algorithm(algorithm)
    pattern_units, text_units = _prepare(pattern, text)
    result = MATCHERS[algorithm](pattern_units, text_units)
    log.debug(
        "%s: pattern=%d text=%d units -> %d matches, %d comparisons",
        algorithm.value, len(pattern_units), len(text_units),
        result.match_count, result.comparison_count,
    )
    return result


def search_all(pattern: str | None, text: str | None) -> dict[Algorithm, MatchResult]:
    """Run all four algorithms on the same input, in Algorithm order."""
    pattern_units, text_units = _prepare(pattern, text)
    results: dict[Algorithm, MatchResult] = {}
    for algorithm, matcher in MATCHERS.items():
        results[algorithm] = matcher(pattern_units, text_units)
    distinct = {r.match_indices for r in results.values()}
    if len(distinct) > 1:
        log.warning("Algorithms disagree on match set for pattern of %d units",
                    len(pattern_units))
    return results
