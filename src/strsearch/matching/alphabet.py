"""CharUnit model: the fixed-width unit every matcher compares.

Python strings index by code point, but the matchers operate on UTF-16
code units so that indices, lengths and hash inputs agree with a 16-bit
character model. A string made only of BMP characters already is such
a sequence. Astral characters are split into their surrogate pair, each
half becoming a one-character str holding a lone surrogate.
"""
from __future__ import annotations

import struct
from typing import TypeAlias

CharUnit: TypeAlias = str  # exactly one UTF-16 code unit
MAX_CODE_UNIT = 0xFFFF


def to_code_units(value: str) -> str:
    """Return `value` re-expressed as one str character per code unit."""
    if not value or max(value) <= "\uffff":
        return value
    raw = value.encode("utf-16-le", "surrogatepass")
    units = struct.unpack(f"<{len(raw) // 2}H", raw)
    return "".join(map(chr, units))


def char_value(unit: CharUnit) -> int:
    """Numeric value of a code unit, in 0..0xFFFF."""
    return ord(unit)
