import polars as pl
import pytest

import biglimb as bl


def test_decimal_columns_round_trip():
    df = pl.DataFrame({"a": ["0", "-4294967296", "64424509677", None]})
    out = df.with_columns(b=bl.from_decimal(pl.col("a"))).with_columns(c=bl.to_decimal(pl.col("b")))
    assert out.schema["b"] == bl.BIGINT_DTYPE
    assert out["c"].to_list() == ["0", "-4294967296", "64424509677", None]
    assert out["b"].to_list()[2] == {"negative": False, "limbs": [237, 15]}


def test_namespace_ops():
    df = pl.DataFrame({"a": ["-3", "4294967296", "7"], "b": ["4", "4294967296", "7"]}).with_columns(
        a=pl.col("a").bigint.from_decimal(),
        b=pl.col("b").bigint.from_decimal(),
    )
    out = df.select(
        p=pl.col("a").bigint.mul(pl.col("b")).bigint.to_decimal(),
        d=pl.col("a").bigint.mul_scalar(-2).bigint.to_decimal(),
        c=pl.col("a").bigint.compare(pl.col("b")),
    )
    assert out["p"].to_list() == ["-12", "18446744073709551616", "49"]
    assert out["d"].to_list() == ["6", "-8589934592", "-14"]
    assert out["c"].to_list() == [-1, 0, 0]


def test_format_dataframe_modes():
    df = pl.DataFrame({"x": ["12", "-34"], "label": ["p", "q"]}).with_columns(x=bl.from_decimal(pl.col("x")))
    replaced = bl.format_bigint_dataframe(df)
    assert replaced["x"].to_list() == ["12", "-34"]
    added = bl.format_bigint_dataframe(df, ["x"], mode="add")
    assert added.columns == ["x", "label", "x_dec"]
    assert added.schema["x"] == bl.BIGINT_DTYPE
    with pytest.raises(ValueError):
        bl.format_bigint_dataframe(df, mode="hex")


def test_invalid_decimal_raises_invalid_format():
    df = pl.DataFrame({"a": ["12x"]})
    with pytest.raises(bl.InvalidFormat):
        df.select(bl.from_decimal(pl.col("a")))


def test_signed_zero_is_one_column_value():
    df = pl.DataFrame({"a": ["-5", "3", "-0"]}).with_columns(a=bl.from_decimal(pl.col("a")))
    out = df.select(z=pl.col("a").bigint.mul_scalar(0))
    assert out["z"].n_unique() == 1
    assert out["z"].to_list()[0] == {"negative": False, "limbs": [0]}
    assert df["a"].to_list()[2] == {"negative": False, "limbs": [0]}
