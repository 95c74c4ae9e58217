"""Tests for plain-text result reports."""

import pytest

from strsearch.matching.engine import search, search_all
from strsearch.matching.result import Algorithm
from strsearch.matching.rolling_hash import initial_hash
from strsearch.reporting.report import (
    format_comparison,
    format_report,
    format_summary,
    write_report,
)


class TestFormatSummary:

    def test_summary_line(self):
        result = search(Algorithm.NAIVE, "aa", "aaaa")
        assert format_summary(result) == "Found 3 matches in 6 comparisons."


class TestFormatReport:

    def test_naive_has_no_table(self):
        result = search(Algorithm.NAIVE, "aa", "aaaa")
        assert format_report(result, "aa", "aaaa") == (
            "Found 3 matches in 6 comparisons using Naive (brute-force) searching.\n"
            "Pattern: aa\n"
            "Text: aaaa\n"
            "\n"
            "Match at index 0!\n"
            "Match at index 1!\n"
            "Match at index 2!\n"
        )

    def test_kmp_failure_table_per_position(self):
        result = search(Algorithm.KMP, "aba", "ababa")
        assert format_report(result, "aba", "ababa") == (
            "Found 2 matches in 5 comparisons using Knuth-Morris-Pratt searching.\n"
            "Pattern: aba\n"
            "Text: ababa\n"
            "\n"
            "Knuth-Morris-Pratt Failure Table:\n"
            "a: 0\n"
            "b: 0\n"
            "a: 1\n"
            "\n"
            "Match at index 0!\n"
            "Match at index 2!\n"
        )

    def test_boyer_moore_table_per_character(self):
        result = search(Algorithm.BOYER_MOORE, "abca", "abcabca")
        report = format_report(result, "abca", "abcabca")
        assert (
            "Boyer-Moore Last Occurrence Table:\n"
            "a: 3\n"
            "b: 1\n"
            "c: 2\n"
            "\n"
        ) in report
        assert report.startswith("Found 2 matches in 8 comparisons using Boyer-Moore")

    def test_rabin_karp_hash(self):
        result = search(Algorithm.RABIN_KARP, "ab", "abab")
        report = format_report(result, "ab", "abab")
        assert f"Rabin-Karp Pattern Hash: {initial_hash('ab')}\n\n" in report
        assert report.endswith("Match at index 0!\nMatch at index 2!\n")

    def test_failure_table_labelled_per_code_unit(self):
        pattern = "\U0001F600"
        result = search(Algorithm.KMP, pattern, "a" + pattern)
        lines = format_report(result, pattern, "a" + pattern).splitlines()
        start = lines.index("Knuth-Morris-Pratt Failure Table:")
        assert lines[start + 1:start + 4] == ["\ud83d: 0", "\ude00: 0", ""]
        assert lines[1] == f"Pattern: {pattern}"

    def test_no_matches_still_formats(self):
        result = search(Algorithm.KMP, "xyz", "abcabc")
        report = format_report(result, "xyz", "abcabc")
        assert report.startswith("Found 0 matches in 4 comparisons")
        assert "Match at index" not in report


class TestFormatComparison:

    def test_one_row_per_algorithm(self):
        table = format_comparison(search_all("aa", "aaaa"))
        lines = table.splitlines()
        assert len(lines) == 2 + 4
        assert lines[2].startswith("Naive (brute-force)")
        assert "WARNING" not in table

    def test_flags_disagreement(self):
        results = search_all("aa", "aaaa")
        results[Algorithm.KMP] = search(Algorithm.KMP, "ab", "abab")
        assert "WARNING: algorithms disagree" in format_comparison(results)


class TestWriteReport:

    def test_writes_when_matched(self, tmp_path):
        result = search(Algorithm.NAIVE, "ab", "abab")
        written = write_report(result, "ab", "abab", tmp_path / "matches.txt")
        assert written == (tmp_path / "matches.txt").resolve()
        assert written.read_text(encoding="utf-8") == format_report(result, "ab", "abab")

    def test_skips_when_no_match(self, tmp_path):
        result = search(Algorithm.NAIVE, "xyz", "abcabc")
        assert write_report(result, "xyz", "abcabc", tmp_path / "matches.txt") is None
        assert not (tmp_path / "matches.txt").exists()

    def test_write_error_propagates(self, tmp_path):
        result = search(Algorithm.NAIVE, "ab", "abab")
        with pytest.raises(OSError):
            write_report(result, "ab", "abab", tmp_path / "missing" / "matches.txt")
