from __future__ import annotations

from typing import Optional


class BigIntError(Exception):
    """Base class for errors raised by the arithmetic engine."""


# Constructor arguments go to ``args`` unchanged so the errors can be rebuilt
# from them (pickle, polars re-raising from map_elements).
class InvalidFormat(BigIntError, ValueError):
    def __init__(self, text: str, position: int, reason: Optional[str] = None) -> None:
        super().__init__(text, position, reason)
        self.text = text
        self.position = position
        self.reason = reason or "invalid character"

    def __str__(self) -> str:
        return f"{self.reason} at position {self.position} in {self.text!r}"


class InvalidDigit(BigIntError, ValueError):
    def __init__(self, digit: int) -> None:
        super().__init__(digit)
        self.digit = digit

    def __str__(self) -> str:
        return f"decimal digit must be in [0, 9], got {self.digit!r}"


class DivisionByZero(BigIntError, ZeroDivisionError):
    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message or "scalar division by zero"

    def __str__(self) -> str:
        return self.message
