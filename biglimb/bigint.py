"""Arbitrary-precision integers stored as little-endian 32-bit limbs."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Tuple

from .errors import DivisionByZero, InvalidDigit, InvalidFormat
from .limbs import LIMB_BITS, LIMB_MASK, check_limb, combine, split

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


# ------- limb-vector primitives -------
def _multiply_add(limbs: List[int], base: int, carry: int) -> int:
    """Apply ``limb[i] = limb[i] * base + carry`` across the vector in place.

    The final carry becomes a new most-significant limb when non-zero, or when
    the vector was empty. Returns that final carry.
    """
    for i, limb in enumerate(limbs):
        carry, limbs[i] = split(combine(0, limb) * base + carry)
    if carry or not limbs:
        limbs.append(carry)
    return carry


def _divide_small(limbs: List[int], divisor: int) -> int:
    """Divide the vector by one non-zero limb in place; returns the remainder."""
    if divisor == 0:
        raise DivisionByZero()
    remainder = 0
    for i in reversed(range(len(limbs))):
        limbs[i], remainder = divmod(combine(remainder, limbs[i]), divisor)
    _strip(limbs)
    return remainder


def _strip(limbs: List[int]) -> None:
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)


def _is_zero(limbs: List[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def _compare_magnitudes(a: List[int], b: List[int]) -> int:
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return 1 if x > y else -1
    return 0


def _scalar_magnitude(value: Any, what: str) -> Tuple[int, bool]:
    """Split a signed machine integer into (magnitude, is_negative)."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        return check_limb(-value, what), True
    return check_limb(value, what), False


class BigInt:
    """Signed arbitrary-precision integer.

    The magnitude is a list of unsigned limbs, least significant first, and is
    never empty: zero is the single limb ``[0]``. ``negative`` is a separate
    flag that is ignored when the magnitude is zero.

    Scalar operations (:meth:`iadd`, :meth:`imul`, :meth:`idiv`, ``+=``,
    ``*=``) mutate the receiver. ``+`` and ``*`` return new instances.
    """

    __slots__ = ("_limbs", "_negative")

    def __init__(self, text: str = "0") -> None:
        self._limbs, self._negative = _parse(text)

    @classmethod
    def parse(cls, text: str) -> "BigInt":
        """Parse ``^[+-]?[0-9]+$``; raises :class:`InvalidFormat` otherwise."""
        return cls(text)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Convert a Python ``int`` into a BigInt."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"expected int, got {type(value).__name__}")
        magnitude = -value if value < 0 else value
        limbs = []
        while magnitude:
            limbs.append(magnitude & LIMB_MASK)
            magnitude >>= LIMB_BITS
        return cls._from_parts(limbs, value < 0)

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], negative: bool = False) -> "BigInt":
        """Build from little-endian limbs, validating and stripping them."""
        return cls._from_parts([check_limb(int(limb)) for limb in limbs], bool(negative))

    @classmethod
    def _from_parts(cls, limbs: List[int], negative: bool) -> "BigInt":
        obj = cls.__new__(cls)
        _strip(limbs)
        obj._limbs = limbs
        obj._negative = negative
        return obj

    def to_int(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = (value << LIMB_BITS) | limb
        return -value if self._negative else value

    # ------- inspection -------
    @property
    def limbs(self) -> Tuple[int, ...]:
        """Magnitude limbs, least significant first."""
        return tuple(self._limbs)

    @property
    def negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return _is_zero(self._limbs)

    def __bool__(self) -> bool:
        return not _is_zero(self._limbs)

    def copy(self) -> "BigInt":
        obj = type(self).__new__(type(self))
        obj._limbs = list(self._limbs)
        obj._negative = self._negative
        return obj

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    # ------- in-place scalar operations -------
    def push_digit(self, digit: int) -> "BigInt":
        """Append one decimal digit: ``self = self * 10 + digit``."""
        if not isinstance(digit, int) or isinstance(digit, bool) or not 0 <= digit <= 9:
            raise InvalidDigit(digit)
        _multiply_add(self._limbs, 10, digit)
        return self

    def iadd(self, value: int) -> "BigInt":
        """Add an unsigned limb to the magnitude in place."""
        _multiply_add(self._limbs, 1, check_limb(value, "addend"))
        return self

    def imul(self, value: int) -> "BigInt":
        """Multiply in place by a signed machine integer.

        A negative multiplier flips the sign flag; its magnitude must fit in a
        single limb.
        """
        magnitude, flip = _scalar_magnitude(value, "multiplier")
        _multiply_add(self._limbs, magnitude, 0)
        _strip(self._limbs)
        if flip:
            self._negative = not self._negative
        return self

    def idiv(self, divisor: int) -> int:
        """Truncating in-place division by a signed machine integer.

        Returns the remainder of the magnitude division. A negative divisor
        flips the sign flag. Raises :class:`DivisionByZero` without touching
        the value when ``divisor`` is 0.
        """
        magnitude, flip = _scalar_magnitude(divisor, "divisor")
        remainder = _divide_small(self._limbs, magnitude)
        if flip:
            self._negative = not self._negative
        return remainder

    def divmod_small(self, divisor: int) -> Tuple["BigInt", int]:
        quotient = self.copy()
        remainder = quotient.idiv(divisor)
        return quotient, remainder

    def __iadd__(self, other: Any) -> "BigInt":
        if isinstance(other, int) and not isinstance(other, bool):
            return self.iadd(other)
        return NotImplemented

    def __imul__(self, other: Any) -> "BigInt":
        if isinstance(other, BigInt):
            return multiply(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.imul(other)
        return NotImplemented

    def __add__(self, other: Any) -> "BigInt":
        if isinstance(other, int) and not isinstance(other, bool):
            return self.copy().iadd(other)
        return NotImplemented

    __radd__ = __add__

    def __mul__(self, other: Any) -> "BigInt":
        if isinstance(other, BigInt):
            return multiply(self, other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.copy().imul(other)
        return NotImplemented

    __rmul__ = __mul__

    # ------- ordering -------
    def compare(self, other: "BigInt") -> int:
        """Three-way comparison returning -1, 0 or 1."""
        self_zero, other_zero = self.is_zero(), other.is_zero()
        if self_zero and other_zero:
            return 0
        if other_zero:
            return -1 if self._negative else 1
        if self_zero:
            return 1 if other._negative else -1
        if self._negative != other._negative:
            return -1 if self._negative else 1
        result = _compare_magnitudes(self._limbs, other._limbs)
        return -result if self._negative else result

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) >= 0

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    # ------- decimal output -------
    def __str__(self) -> str:
        if _is_zero(self._limbs):
            return "0"
        # scalar division is destructive, so work on a copy
        limbs = list(self._limbs)
        digits = []
        while not _is_zero(limbs):
            digits.append(_DIGITS[_divide_small(limbs, 10)])
        if self._negative:
            digits.append("-")
        return "".join(reversed(digits))

    def __repr__(self) -> str:
        return f"BigInt('{self}')"


def _parse(text: str) -> Tuple[List[int], bool]:
    if not isinstance(text, str):
        raise TypeError(f"BigInt() expects a decimal string, got {type(text).__name__}")
    pos = 0
    negative = False
    if text[:1] == "-":
        negative, pos = True, 1
    elif text[:1] == "+":
        pos = 1
    if pos >= len(text) or text[pos] not in _DIGITS:
        raise InvalidFormat(text, pos, "expected a decimal digit")

    limbs: List[int] = []
    for i in range(pos, len(text)):
        ch = text[i]
        if ch not in _DIGITS:
            raise InvalidFormat(text, i)
        _multiply_add(limbs, 10, _DIGITS.index(ch))
    logger.debug("parsed %d digits into %d limbs", len(text) - pos, len(limbs))
    return limbs, negative


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """Schoolbook product of two BigInts; neither operand is modified.

    The sign of the result is the XOR of the operand signs. A zero product
    is canonical zero with the sign cleared.
    """
    if a.is_zero() or b.is_zero():
        return BigInt()
    x, y = a._limbs, b._limbs
    result = [0] * (len(x) + len(y))
    for i, xi in enumerate(x):
        for j, yj in enumerate(y):
            carry, result[i + j] = split(combine(0, xi) * combine(0, yj) + combine(0, result[i + j]))
            k = i + j + 1
            while carry:
                if k == len(result):
                    result.append(0)
                carry, result[k] = split(combine(0, result[k]) + carry)
                k += 1
    return BigInt._from_parts(result, a.negative != b.negative)


def pow2(n: int) -> BigInt:
    """Return ``2**n`` by repeated scalar doubling (reference utility, O(n))."""
    if n < 0:
        raise ValueError("pow2 exponent must be non-negative")
    value = BigInt("1")
    for _ in range(n):
        value.imul(2)
    return value
