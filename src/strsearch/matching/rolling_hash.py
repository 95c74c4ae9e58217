"""Polynomial rolling hash with 32-bit signed wraparound.

The hash of a window c[0..m-1] is

    H = sum(c[i] * BASE ** (m - 1 - i))   (mod 2**32, read as signed)

i.e. the value a 32-bit two's-complement int would hold after computing
it with overflowing multiplication and addition. Python ints never
overflow, so every result is folded back into the signed 32-bit range
with wrap_int32(). Because reduction mod 2**32 commutes with + and *,
folding once after a compound expression gives the same value as
wrapping each intermediate step.

Wraparound is part of the hash's definition, not an accident: it
decides which windows collide, and therefore how many verification
comparisons Rabin-Karp performs.

Sliding the window one position right:

    H' = (H - c_out * BASE ** (m - 1)) * BASE + c_in

BASE ** (m - 1) is computed once per window length with integer
arithmetic, never through floating point.
"""
from __future__ import annotations

from strsearch.matching.alphabet import CharUnit, char_value

BASE = 113

_UINT32_MASK = 0xFFFF_FFFF
_INT32_SIGN = 0x8000_0000
_UINT32_RANGE = 0x1_0000_0000


def wrap_int32(value: int) -> int:
    """Reduce an arbitrary int to the signed 32-bit value it wraps to."""
    value &= _UINT32_MASK
    if value & _INT32_SIGN:
        return value - _UINT32_RANGE
    return value


def wrapping_pow(base: int, exponent: int) -> int:
    """base ** exponent under 32-bit signed wraparound."""
    return wrap_int32(pow(base, exponent, _UINT32_RANGE))


def initial_hash(window: str, base: int = BASE) -> int:
    """Hash of a whole window, accumulated Horner-style."""
    value = 0
    for unit in window:
        value = wrap_int32(value * base + char_value(unit))
    return value


class RollingHash:
    """Hash of a fixed-length window that slides over a text.

    Only the current value is kept; rolling discards the previous one.

    Usage:
        rh = RollingHash(text[:m])
        rh.roll(text[0], text[m])   # now hashes text[1:m + 1]
    """

    __slots__ = ("_base", "_high_power", "_length", "value")

    def __init__(self, window: str, base: int = BASE) -> None:
        if not window:
            raise ValueError("Rolling hash window must not be empty")
        self._base = base
        self._length = len(window)
        self._high_power = wrapping_pow(base, self._length - 1)
        self.value = initial_hash(window, base)

    @property
    def length(self) -> int:
        return self._length

    def roll(self, outgoing: CharUnit, incoming: CharUnit) -> int:
        """Drop `outgoing` from the left, append `incoming`, return the new value."""
        self.value = wrap_int32(
            (self.value - char_value(outgoing) * self._high_power) * self._base
            + char_value(incoming)
        )
        return self.value
