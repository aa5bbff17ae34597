"""Exact numbers from literal text such as ``"42"``, ``"-42.21"`` or ``"1.5 / 0.25"``."""

from __future__ import annotations

from typing import Any

from ratnum.number import Number

_U64_MAX = (1 << 64) - 1
_I64_MAX = (1 << 63) - 1


def parse_literal(text: str) -> tuple[int, int]:
    """Split an unsigned integer or finite decimal literal into a ratio of two u64 values.

    Underscores are ignored. Raises ValueError on malformed text and
    OverflowError when a part does not fit 64 unsigned bits.
    """
    numerator = 0
    denominator = 1
    seen_point = False
    seen_digit = False

    for char in text:
        if char == "_":
            continue
        if char == ".":
            if seen_point:
                raise ValueError("num literal should contain at most one decimal point")
            seen_point = True
            continue
        if not "0" <= char <= "9":
            raise ValueError("num literal should be an integer or finite decimal")

        numerator = numerator * 10 + (ord(char) - ord("0"))
        if numerator > _U64_MAX:
            raise OverflowError("num literal numerator should fit u64")
        if seen_point:
            denominator *= 10
            if denominator > _U64_MAX:
                raise OverflowError("num literal denominator should fit u64")
        seen_digit = True

    if not seen_digit:
        raise ValueError("num literal should contain digits")
    return numerator, denominator


def from_literal(text: str, negative: bool) -> Number:
    """Build a number from an unsigned literal and a sign."""
    numerator, denominator = parse_literal(text)
    return from_unsigned_ratio_parts(numerator, denominator, negative)


def from_ratio_literals(
    numerator: str,
    numerator_negative: bool,
    denominator: str,
    denominator_negative: bool,
) -> Number:
    """Build ``numerator / denominator`` from two signed literals."""
    left_numerator, left_denominator = parse_literal(numerator)
    right_numerator, right_denominator = parse_literal(denominator)
    if right_numerator == 0:
        raise ZeroDivisionError("num ratio denominator should not be zero")

    combined_numerator = left_numerator * right_denominator
    combined_denominator = left_denominator * right_numerator
    if combined_numerator > _U64_MAX:
        raise OverflowError("num ratio numerator should fit u64")
    if combined_denominator > _U64_MAX:
        raise OverflowError("num ratio denominator should fit u64")

    return from_unsigned_ratio_parts(
        combined_numerator,
        combined_denominator,
        numerator_negative != denominator_negative,
    )


def from_unsigned_ratio_parts(numerator: int, denominator: int, negative: bool) -> Number:
    """Build a signed ratio from unsigned parts, keeping the 64-bit limits of each part."""
    if denominator == 0:
        raise ZeroDivisionError("num ratio denominator should not be zero")
    if not 0 <= numerator <= _U64_MAX or not 0 < denominator <= _U64_MAX:
        raise OverflowError("num ratio parts should fit u64")

    if negative:
        if denominator > _I64_MAX:
            raise OverflowError("negative num literal denominator should fit i64")
        if numerator > _I64_MAX + 1:
            raise OverflowError("negative num literal numerator should fit i64")
        return Number.from_ratio(-numerator, denominator)
    return Number.from_ratio(numerator, denominator)


def _signed(part: str) -> tuple[str, bool]:
    part = part.strip()
    if part.startswith("-"):
        return part[1:].strip(), True
    return part, False


def num(value: Any) -> Number:
    """Build a number from a literal string or from any convertible value.

    Strings may be ``"n"``, ``"-n"``, decimals such as ``"42.21"`` and ratios
    such as ``"-32 / 12"``. Other values go through ``Number``: ``True`` is 1,
    ``False`` is -1 and ``None`` is 0.
    """
    if isinstance(value, str):
        left, separator, right = value.partition("/")
        if separator:
            return from_ratio_literals(*_signed(left), *_signed(right))
        return from_literal(*_signed(left))
    return Number(value)