import pytest

import biglimb as bl
from biglimb.limbs import check_limb


def test_combine_split_inverse():
    for high, low in [(0, 0), (0, 1), (1, 0), (bl.LIMB_MASK, bl.LIMB_MASK), (12345, 67890)]:
        assert bl.split(bl.combine(high, low)) == (high, low)


def test_combine_value():
    assert bl.combine(1, 0) == 1 << 32
    assert bl.combine(15, 237) == 64424509677


def test_split_rejects_out_of_range():
    with pytest.raises(OverflowError):
        bl.split(1 << 64)
    with pytest.raises(OverflowError):
        bl.split(-1)


def test_combine_rejects_wide_limbs():
    with pytest.raises(OverflowError):
        bl.combine(bl.LIMB_BASE, 0)


def test_check_limb():
    assert check_limb(bl.LIMB_MASK) == bl.LIMB_MASK
    with pytest.raises(OverflowError):
        check_limb(-1)
    with pytest.raises(TypeError):
        check_limb(1.5)
