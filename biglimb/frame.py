"""Polars helpers for columns of BigInt values.

A BigInt column is a struct of the sign flag and the little-endian limb list,
see :data:`BIGINT_DTYPE`. Every operation here is elementwise and runs the
pure-Python engine per row; nulls propagate.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import polars as pl

from .bigint import BigInt, multiply

BIGINT_DTYPE = pl.Struct({"negative": pl.Boolean, "limbs": pl.List(pl.UInt32)})


def _to_row(value: BigInt) -> dict:
    # zero is stored unsigned so 0 and -0 are one column value
    return {"negative": value.negative and not value.is_zero(), "limbs": list(value.limbs)}


def _from_row(row: Any) -> BigInt:
    return BigInt.from_limbs(row["limbs"], row["negative"])


def _binary(fn: Callable[[BigInt, BigInt], Any]) -> Callable[[dict], Any]:
    def call(row: dict) -> Any:
        a, b = row["a"], row["b"]
        if a is None or b is None:
            return None
        return fn(_from_row(a), _from_row(b))

    return call


def from_decimal(expr: pl.Expr) -> pl.Expr:
    """Parse a column of decimal strings into BigInt structs."""
    return expr.map_elements(lambda s: _to_row(BigInt(s)), return_dtype=BIGINT_DTYPE)


def to_decimal(expr: pl.Expr) -> pl.Expr:
    """Render a BigInt column as decimal strings."""
    return expr.map_elements(lambda row: str(_from_row(row)), return_dtype=pl.String)


def mul(a: pl.Expr, b: pl.Expr) -> pl.Expr:
    """Row-wise bignum product of two BigInt columns."""
    return pl.struct(a.alias("a"), b.alias("b")).map_elements(
        _binary(lambda x, y: _to_row(multiply(x, y))), return_dtype=BIGINT_DTYPE
    )


def mul_scalar(expr: pl.Expr, value: int) -> pl.Expr:
    """Multiply every row by one signed machine integer."""
    return expr.map_elements(lambda row: _to_row(_from_row(row).imul(value)), return_dtype=BIGINT_DTYPE)


def compare(a: pl.Expr, b: pl.Expr) -> pl.Expr:
    """Row-wise three-way comparison (-1, 0, 1) as Int8."""
    return pl.struct(a.alias("a"), b.alias("b")).map_elements(
        _binary(lambda x, y: x.compare(y)), return_dtype=pl.Int8
    )


@pl.api.register_expr_namespace("bigint")
class BigIntNamespace:
    """``pl.col(...).bigint`` accessor mirroring the module functions."""

    def __init__(self, expr: pl.Expr) -> None:
        self._expr = expr

    def from_decimal(self) -> pl.Expr:
        return from_decimal(self._expr)

    def to_decimal(self) -> pl.Expr:
        return to_decimal(self._expr)

    def mul(self, other: pl.Expr) -> pl.Expr:
        return mul(self._expr, other)

    def mul_scalar(self, value: int) -> pl.Expr:
        return mul_scalar(self._expr, value)

    def compare(self, other: pl.Expr) -> pl.Expr:
        return compare(self._expr, other)


def format_bigint_dataframe(
    df: pl.DataFrame, bigint_columns: Optional[list[str]] = None, mode: str = "replace"
) -> pl.DataFrame:
    """Format a DataFrame to display BigInt columns as decimal strings.

    Args:
        df: Input DataFrame
        bigint_columns: List of BigInt column names. If None, every column whose
            dtype is :data:`BIGINT_DTYPE` is formatted.
        mode: Either "replace" (replace struct columns with decimal) or "add"
            (add ``{column}_dec`` columns)

    Returns:
        DataFrame with formatted BigInt display
    """
    if mode not in ("replace", "add"):
        raise ValueError(f"Invalid mode '{mode}'. Must be 'replace' or 'add'.")
    if bigint_columns is None:
        bigint_columns = [name for name, dtype in df.schema.items() if dtype == BIGINT_DTYPE]

    suffix = "" if mode == "replace" else "_dec"
    return df.with_columns(
        **{f"{name}{suffix}": to_decimal(pl.col(name)) for name in bigint_columns}
    )


def print_bigint_dataframe(df: pl.DataFrame, bigint_columns: Optional[list[str]] = None) -> None:
    """Print a DataFrame with BigInt columns rendered as decimal strings."""
    print(format_bigint_dataframe(df, bigint_columns, mode="replace"))
