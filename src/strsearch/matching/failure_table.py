"""KMP failure table (prefix function).

failure_table[j] is the length of the longest proper prefix of
pattern[0..j] that is also a suffix of it. On a mismatch after j
matched characters, KMP resumes comparing at pattern index
failure_table[j - 1] instead of restarting at 0, because those
characters are already known to match the text.

Construction walks two cursors over the pattern:

    i -- length of the prefix currently matched against the suffix
    j -- position whose entry is being computed

Each entry depends only on entries at smaller indices, so the table
is filled left to right with no backtracking over j.
"""
from __future__ import annotations


def build_failure_table(pattern: str) -> tuple[int, ...]:
    """Return the failure table for `pattern` (one entry per position).

    >>> build_failure_table("ababaca")
    (0, 0, 1, 2, 3, 0, 1)
    """
    table = [0] * len(pattern)
    i = 0
    j = 1
    while j < len(pattern):
        if pattern[i] == pattern[j]:
            table[j] = i + 1
            i += 1
            j += 1
        elif i == 0:
            table[j] = 0
            j += 1
        else:
            # Retry j against a shorter border; j does not advance.
            i = table[i - 1]
    return tuple(table)
