#!/usr/bin/env python3
"""Example: BigInt columns in a Polars DataFrame."""

import polars as pl
import biglimb as bl

df = pl.DataFrame({
    "a": ["92837508234109812317501984209810928409182094187192", "-4294967296", "7"],
    "b": ["19874891279817498172489713987498173849713897489171", "4294967296", "-6"],
}).with_columns(
    a=bl.from_decimal(pl.col("a")),
    b=pl.col("b").bigint.from_decimal(),
)

out = df.with_columns(
    product=bl.mul(pl.col("a"), pl.col("b")),
    doubled=pl.col("a").bigint.mul_scalar(2),
    cmp=bl.compare(pl.col("a"), pl.col("b")),
)

# Struct columns are hard to read; render them as decimal strings
bl.print_bigint_dataframe(out)
