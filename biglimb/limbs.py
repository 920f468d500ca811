"""Limb codec: the only place carry arithmetic crosses the limb boundary."""

from __future__ import annotations

from typing import Tuple

LIMB_BITS = 32
LIMB_BASE = 1 << LIMB_BITS
LIMB_MASK = LIMB_BASE - 1
# double-width accumulator range: any limb*limb + limb + limb fits below this
WIDE_BASE = 1 << (2 * LIMB_BITS)


def check_limb(value: int, what: str = "limb") -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0 or value > LIMB_MASK:
        raise OverflowError(f"{what} {value} does not fit in {LIMB_BITS} bits")
    return value


def combine(high: int, low: int) -> int:
    """Join two limbs into one double-width value: ``high * 2**LIMB_BITS + low``."""
    check_limb(high, "high limb")
    check_limb(low, "low limb")
    return (high << LIMB_BITS) | low


def split(value: int) -> Tuple[int, int]:
    """Inverse of :func:`combine`; returns ``(high, low)``."""
    if value < 0 or value >= WIDE_BASE:
        raise OverflowError(f"{value} does not fit in {2 * LIMB_BITS} bits")
    return value >> LIMB_BITS, value & LIMB_MASK
