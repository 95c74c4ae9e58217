"""Shared fixtures and helpers for the strsearch tests."""
from __future__ import annotations

import random

import pytest

from strsearch.matching.result import Algorithm

SEED = 42

ALL_ALGORITHMS = list(Algorithm)

# Units whose values straddle BASE (113) so short windows collide
# without wraparound: 97 * 113 + 210 == 98 * 113 + 97.
COLLIDING_ALPHABET = "abÒ"

# Windows whose unit values differ by (26, 38, 70, 106, 16): the weighted
# difference is exactly 2**32, so they collide only through the 32-bit wrap.
WRAP_COLLISION_PATTERN = "".join(map(chr, [226, 238, 270, 306, 216]))
WRAP_COLLISION_WINDOW = chr(200) * 5


def find_all(pattern: str, text: str) -> list[int]:
    """Every (possibly overlapping) start index of pattern in text, via str.find."""
    indices: list[int] = []
    start = text.find(pattern)
    while start != -1:
        indices.append(start)
        start = text.find(pattern, start + 1)
    return indices


def random_case(
    rng: random.Random,
    alphabet: str,
    max_pattern: int = 8,
    max_text: int = 60,
) -> tuple[str, str]:
    """Generate a valid (pattern, text) pair over `alphabet`.

    About half of the patterns are cut from the text itself so that
    matches actually occur.
    """
    text_len = rng.randint(1, max_text)
    text = "".join(rng.choice(alphabet) for _ in range(text_len))
    pattern_len = rng.randint(1, min(max_pattern, text_len))
    if rng.random() < 0.5:
        start = rng.randint(0, text_len - pattern_len)
        pattern = text[start:start + pattern_len]
    else:
        pattern = "".join(rng.choice(alphabet) for _ in range(pattern_len))
    return pattern, text


@pytest.fixture(params=ALL_ALGORITHMS, ids=lambda a: a.value)
def algorithm(request) -> Algorithm:
    return request.param
