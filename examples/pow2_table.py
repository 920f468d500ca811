#!/usr/bin/env python3
"""Example: exact powers of two and their limb layout."""

import biglimb as bl

for n in (0, 31, 32, 64, 100, 128):
    value = bl.pow2(n)
    print(f"2**{n:<3} = {value}  limbs={list(value.limbs)}")

# Divide back down: 2**128 / 2**32 == 2**96
value = bl.pow2(128)
for _ in range(32):
    assert value.idiv(2) == 0
print("2**96 =", value)
