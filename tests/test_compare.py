import pytest

import biglimb as bl
from builders import raw_bigint


def B(text):
    return bl.BigInt(text)


def test_zero_equals_negative_zero():
    assert B("0") == B("-0")
    assert raw_bigint([0], negative=True) == B("0")
    assert B("0").compare(B("-0")) == 0
    assert not (B("-0") < B("0"))


def test_sign_ordering():
    assert B("-5") < B("0") < B("5")
    assert B("-1") < B("1")
    assert B("0") > B("-4294967296")


def test_limb_count_breaks_ties():
    assert B("4294967295") < B("4294967296")
    assert B("-4294967296") < B("-4294967295")
    assert raw_bigint([0, 2]) > raw_bigint([bl.LIMB_MASK, 1])


def test_most_significant_limb_decides():
    assert raw_bigint([9, 1]) < raw_bigint([0, 2])
    assert raw_bigint([9, 1], negative=True) > raw_bigint([0, 2], negative=True)


def test_total_order_matches_int():
    values = ["-18446744073709551616", "-4294967297", "-7", "-0", "0", "3", "4294967296", "18446744073709551615"]
    for a in values:
        for b in values:
            x, y = int(a), int(b)
            assert B(a).compare(B(b)) == (x > y) - (x < y)
            assert (B(a) == B(b)) == (x == y)
            assert (B(a) != B(b)) == (x != y)
            assert (B(a) <= B(b)) == (x <= y)
            assert (B(a) >= B(b)) == (x >= y)


def test_truthiness():
    assert not B("0")
    assert not B("-0")
    assert B("-1")


def test_not_comparable_with_int():
    assert (B("1") == 1) is False
    with pytest.raises(TypeError):
        B("1") < 1


def test_unhashable():
    with pytest.raises(TypeError):
        hash(B("1"))
