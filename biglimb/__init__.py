"""Arbitrary-precision integers over 32-bit limbs, with polars column helpers."""

from __future__ import annotations

from .bigint import BigInt, multiply, pow2
from .errors import BigIntError, DivisionByZero, InvalidDigit, InvalidFormat
from .limbs import LIMB_BASE, LIMB_BITS, LIMB_MASK, combine, split
from .report import CheckResults

# Importing frame registers the ``pl.col(...).bigint`` namespace
from .frame import (
    BIGINT_DTYPE,
    compare,
    format_bigint_dataframe,
    from_decimal,
    mul,
    mul_scalar,
    print_bigint_dataframe,
    to_decimal,
)

__all__ = [
    "BigInt",
    "multiply",
    "pow2",
    "BigIntError",
    "DivisionByZero",
    "InvalidDigit",
    "InvalidFormat",
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    "combine",
    "split",
    "CheckResults",
    "BIGINT_DTYPE",
    "from_decimal",
    "to_decimal",
    "mul",
    "mul_scalar",
    "compare",
    "format_bigint_dataframe",
    "print_bigint_dataframe",
]
