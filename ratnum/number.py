"""Exact rational numbers that mix freely with Python integers, booleans and floats."""

from __future__ import annotations

import enum
import math
import numbers
from fractions import Fraction
from typing import Any, Iterable

from ratnum.text import format_decimal, format_exact, parse_rational

_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1


class TryFromNumberError(ValueError):
    """Raised when a number does not fit the requested integer kind."""


class IntegerKind(enum.Enum):
    """Fixed-width integer kinds a number can be narrowed into."""

    I8 = (8, True)
    I16 = (16, True)
    I32 = (32, True)
    I64 = (64, True)
    I128 = (128, True)
    ISIZE = (64, True)
    U8 = (8, False)
    U16 = (16, False)
    U32 = (32, False)
    U64 = (64, False)
    U128 = (128, False)
    USIZE = (64, False)

    def __init__(self, bits: int, signed: bool) -> None:
        self.bits = bits
        self.signed = signed

    def bounds(self) -> tuple[int, int]:
        """Smallest and largest value of this kind, both inclusive."""
        if self.signed:
            half = 1 << (self.bits - 1)
            return -half, half - 1
        return 0, (1 << self.bits) - 1


def _float_fraction(value: float) -> Fraction:
    if not math.isfinite(value):
        raise ValueError("float value should be finite")
    return Fraction(value)


def _to_fraction(value: Any) -> Fraction:
    """Convert anything a number can be built from into a fraction.

    ``True`` is 1, ``False`` is -1 and ``None`` is 0.
    """
    if isinstance(value, Number):
        return value._value
    if value is None:
        return Fraction(0)
    if isinstance(value, bool):
        return Fraction(1 if value else -1)
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, float):
        return _float_fraction(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a number")


def _comparable(value: Any) -> Fraction | None:
    if isinstance(value, Number):
        return value._value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    return None


def _truncating_remainder(left: Fraction, right: Fraction) -> Fraction:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    return left - right * int(left / right)


class Number:
    """An immutable exact rational number of unbounded size."""

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = _to_fraction(value)

    @classmethod
    def _wrap(cls, value: Fraction) -> Number:
        number = cls.__new__(cls)
        number._value = value
        return number

    @classmethod
    def from_ratio(cls, numerator: Any, denominator: Any) -> Number:
        """Build ``numerator / denominator``; a zero denominator raises ZeroDivisionError."""
        divisor = _to_fraction(denominator)
        if divisor == 0:
            raise ZeroDivisionError("num ratio denominator should not be zero")
        return cls._wrap(_to_fraction(numerator) / divisor)

    @classmethod
    def from_float(cls, value: float) -> Number:
        """Exact value of a finite float; NaN and infinities raise ValueError."""
        return cls._wrap(_float_fraction(float(value)))

    @classmethod
    def parse(cls, text: str) -> Number:
        """Parse ``n``, ``n/d`` or a finite decimal literal; raises ValueError."""
        return cls._wrap(parse_rational(text))

    @classmethod
    def from_str_radix(cls, text: str, radix: int) -> Number:
        """Parse ``text`` in the given radix; only radix 10 is supported."""
        if radix != 10:
            raise ValueError(f"unsupported radix {radix}")
        return cls.parse(text)

    @classmethod
    def zero(cls) -> Number:
        return cls._wrap(Fraction(0))

    @classmethod
    def one(cls) -> Number:
        return cls._wrap(Fraction(1))

    @property
    def numerator(self) -> int:
        return self._value.numerator

    @property
    def denominator(self) -> int:
        return self._value.denominator

    def to_fraction(self) -> Fraction:
        return self._value

    def to_integer(self, kind: IntegerKind) -> int:
        """The value as an integer of ``kind``; raises TryFromNumberError if it does not fit."""
        if self._value.denominator != 1:
            raise TryFromNumberError(f"{format_exact(self._value)} is not an integer")
        low, high = kind.bounds()
        value = self._value.numerator
        if not low <= value <= high:
            raise TryFromNumberError(f"{value} does not fit {kind.name}")
        return value

    def to_nonzero_integer(self, kind: IntegerKind) -> int:
        """Like ``to_integer`` but zero is rejected too."""
        value = self.to_integer(kind)
        if value == 0:
            raise TryFromNumberError("value should not be zero")
        return value

    def pow(self, exponent: int) -> Number:
        """Raise to an integer power in the 16-bit signed range."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError("exponent should be an integer")
        if not _I16_MIN <= exponent <= _I16_MAX:
            raise ValueError(f"exponent {exponent} out of range")
        return Number._wrap(self._value**exponent)

    def __pow__(self, exponent: int) -> Number:
        return self.pow(exponent)

    def _binary(self, other: Any, operation) -> Number:
        try:
            operand = _to_fraction(other)
        except TypeError:
            return NotImplemented
        return Number._wrap(operation(self._value, operand))

    def _reflected(self, other: Any, operation) -> Number:
        try:
            operand = _to_fraction(other)
        except TypeError:
            return NotImplemented
        return Number._wrap(operation(operand, self._value))

    def __add__(self, other: Any) -> Number:
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other: Any) -> Number:
        return self._reflected(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Number:
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other: Any) -> Number:
        return self._reflected(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Number:
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other: Any) -> Number:
        return self._reflected(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Number:
        return self._binary(other, lambda a, b: a / b)

    def __rtruediv__(self, other: Any) -> Number:
        return self._reflected(other, lambda a, b: a / b)

    def __mod__(self, other: Any) -> Number:
        return self._binary(other, _truncating_remainder)

    def __rmod__(self, other: Any) -> Number:
        return self._reflected(other, _truncating_remainder)

    def __neg__(self) -> Number:
        return Number._wrap(-self._value)

    def __abs__(self) -> Number:
        return Number._wrap(abs(self._value))

    def __eq__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: Any) -> bool:
        value = _comparable(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Number({format_exact(self._value)!r})"

    def __str__(self) -> str:
        return format_decimal(self._value)

    def __format__(self, spec: str) -> str:
        """``""`` gives the decimal form, ``"#"`` the exact ``n/d`` form."""
        if spec == "":
            return str(self)
        if spec == "#":
            return format_exact(self._value)
        raise ValueError(f"unknown format spec {spec!r}")

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def abs_sub(self, other: Any) -> Number:
        """``self - other`` when positive, zero otherwise."""
        operand = _to_fraction(other)
        if self._value <= operand:
            return Number.zero()
        return Number._wrap(self._value - operand)

    def signum(self) -> Number:
        if self._value > 0:
            return Number.one()
        if self._value < 0:
            return Number._wrap(Fraction(-1))
        return Number.zero()

    def inv(self) -> Number:
        """The reciprocal; zero raises ZeroDivisionError."""
        return Number._wrap(1 / self._value)


def total(values: Iterable[Any]) -> Number:
    """Sum of convertible values; an empty iterable sums to zero."""
    return Number._wrap(sum(map(_to_fraction, values), Fraction(0)))