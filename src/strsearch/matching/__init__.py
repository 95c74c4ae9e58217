"""Exact single-pattern string matching.

Public API:
    search, search_all: validated entry points
    Algorithm, MatchResult: what to run and what comes back
    InvalidInputError, InvalidInputKind: rejected input
    build_failure_table, build_last_occurrence_table: precomputed tables
    RollingHash, initial_hash: the Rabin-Karp hash
"""

from strsearch.matching.engine import search, search_all
from strsearch.matching.failure_table import build_failure_table
from strsearch.matching.last_occurrence import (
    build_last_occurrence_table,
    last_occurrence,
)
from strsearch.matching.result import Algorithm, MatchResult
from strsearch.matching.rolling_hash import (
    BASE,
    RollingHash,
    initial_hash,
    wrap_int32,
)
from strsearch.matching.validation import (
    InvalidInputError,
    InvalidInputKind,
    validate,
)

__all__ = [
    "BASE",
    "Algorithm",
    "InvalidInputError",
    "InvalidInputKind",
    "MatchResult",
    "RollingHash",
    "build_failure_table",
    "build_last_occurrence_table",
    "initial_hash",
    "last_occurrence",
    "search",
    "search_all",
    "validate",
    "wrap_int32",
]
