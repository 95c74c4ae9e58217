"""Report generation for search results.

format_report() produces the results-file layout:

    Found 2 matches in 5 comparisons using Knuth-Morris-Pratt searching.
    Pattern: aba
    Text: ababa

    Knuth-Morris-Pratt Failure Table:
    a: 0
    b: 0
    a: 1

    Match at index 0!
    Match at index 2!

The diagnostic block depends on the algorithm; naive results have none.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from strsearch.matching.alphabet import to_code_units
from strsearch.matching.result import Algorithm, MatchResult

log = logging.getLogger(__name__)


def format_summary(result: MatchResult) -> str:
    """One-line outcome, e.g. 'Found 3 matches in 6 comparisons.'"""
    return (
        f"Found {result.match_count} matches in "
        f"{result.comparison_count} comparisons."
    )


def _diagnostic_lines(result: MatchResult, pattern: str) -> list[str]:
    if result.failure_table is not None:
        lines = [f"{result.algorithm.display_name} Failure Table:"]
        units = to_code_units(pattern)
        lines.extend(
            f"{unit}: {value}" for unit, value in zip(units, result.failure_table)
        )
        return lines + [""]
    if result.last_occurrence_table is not None:
        lines = [f"{result.algorithm.display_name} Last Occurrence Table:"]
        lines.extend(
            f"{unit}: {index}"
            for unit, index in result.last_occurrence_table.items()
        )
        return lines + [""]
    if result.pattern_hash is not None:
        return [
            f"{result.algorithm.display_name} Pattern Hash: {result.pattern_hash}",
            "",
        ]
    return []


def format_report(result: MatchResult, pattern: str, text: str) -> str:
    """Format a MatchResult as the full results-file text.

    `pattern` and `text` are the strings the caller passed to search(),
    not their code-unit form; the failure table is labelled per code
    unit, so the pattern is converted again here.
    """
    lines = [
        f"Found {result.match_count} matches in {result.comparison_count} "
        f"comparisons using {result.algorithm.display_name} searching.",
        f"Pattern: {pattern}",
        f"Text: {text}",
        "",
    ]
    lines.extend(_diagnostic_lines(result, pattern))
    lines.extend(f"Match at index {index}!" for index in result.match_indices)
    return "\n".join(lines) + "\n"


def format_comparison(results: Mapping[Algorithm, MatchResult]) -> str:
    """Format a side-by-side table of several algorithms on one input."""
    lines = [
        f"{'Algorithm':<22} {'Matches':>9} {'Comparisons':>13}",
        "-" * 46,
    ]
    for algorithm, result in results.items():
        lines.append(
            f"{algorithm.display_name:<22} {result.match_count:>9,} "
            f"{result.comparison_count:>13,}"
        )
    distinct = {r.match_indices for r in results.values()}
    if len(distinct) > 1:
        lines.append("")
        lines.append("WARNING: algorithms disagree on match positions")
    return "\n".join(lines)


def write_report(
    result: MatchResult,
    pattern: str,
    text: str,
    path: str | Path,
) -> Path | None:
    """Write the report to `path` if there was at least one match.

    Returns the absolute path written, or None when nothing matched.
    OSError from the write propagates to the caller.
    """
    if not result.found:
        log.debug("No matches; not writing %s", path)
        return None
    output = Path(path).resolve()
    output.write_text(format_report(result, pattern, text), encoding="utf-8")
    log.info("Results saved to %s", output)
    return output
