"""Text forms of exact rationals: parsing and formatting."""

from __future__ import annotations

import re
from fractions import Fraction
from itertools import islice
from numbers import Rational
from typing import Iterator

DEFAULT_FRACTIONAL_DIGITS = 32

_RATIO_PATTERN = re.compile(r"-?[0-9]+(?:/[0-9]+)?")
_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1


def parse_rational(text: str) -> Fraction:
    """Parse ``n``, ``n/d`` or a finite decimal/scientific literal exactly.

    Raises ValueError when the text is none of these.
    """
    if _RATIO_PATTERN.fullmatch(text):
        numerator, _, denominator = text.partition("/")
        if not denominator:
            return Fraction(int(numerator))
        if int(denominator) != 0:
            return Fraction(int(numerator), int(denominator))
    return parse_decimal(text)


def parse_decimal(text: str) -> Fraction:
    """Parse a finite decimal or scientific-notation literal into an exact ratio.

    Underscores are ignored. A literal needs a decimal point or an exponent.
    """
    body = text
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]

    exponent_at = next(
        (position for position, char in enumerate(body) if char in "eE"), None
    )
    mantissa = body if exponent_at is None else body[:exponent_at]

    digits: list[str] = []
    fractional_digits = 0
    seen_point = False
    for char in mantissa:
        if char == "_":
            continue
        if char == ".":
            if seen_point:
                raise ValueError(f"invalid rational: {text!r}")
            seen_point = True
        elif "0" <= char <= "9":
            digits.append(char)
            if seen_point:
                fractional_digits += 1
        else:
            raise ValueError(f"invalid rational: {text!r}")

    if not digits or (not seen_point and exponent_at is None):
        raise ValueError(f"invalid rational: {text!r}")

    exponent = 0
    if exponent_at is not None:
        exponent = _parse_exponent(body[exponent_at + 1 :], text)

    scale = fractional_digits - exponent
    if not _I128_MIN <= scale <= _I128_MAX:
        raise ValueError(f"invalid rational: {text!r}")

    numerator = int("".join(digits))
    if negative:
        numerator = -numerator
    if scale <= 0:
        return Fraction(numerator * 10 ** (-scale))
    return Fraction(numerator, 10**scale)


def _parse_exponent(part: str, text: str) -> int:
    negative = False
    if part[:1] in ("-", "+"):
        negative = part[0] == "-"
        part = part[1:]

    exponent = 0
    seen_digit = False
    for char in part:
        if char == "_":
            continue
        if not "0" <= char <= "9":
            raise ValueError(f"invalid rational: {text!r}")
        exponent = exponent * 10 + (ord(char) - ord("0"))
        if exponent > _I128_MAX:
            raise ValueError(f"invalid rational: {text!r}")
        seen_digit = True

    if not seen_digit:
        raise ValueError(f"invalid rational: {text!r}")
    return -exponent if negative else exponent


def format_exact(value: Rational) -> str:
    """Format as ``n`` for integers and ``n/d`` in lowest terms otherwise."""
    return str(Fraction(value))


def format_decimal(
    value: Rational, fractional_digits: int = DEFAULT_FRACTIONAL_DIGITS
) -> str:
    """Format as a decimal number.

    Terminating expansions are written in full; repeating ones are cut after
    ``fractional_digits`` digits and followed by ``...``.
    """
    value = Fraction(value)
    if value.denominator == 1:
        return str(value.numerator)

    sign = "-" if value < 0 else ""
    denominator = value.denominator
    whole, remainder = divmod(abs(value.numerator), denominator)
    expansion = _expand(remainder, denominator)
    if _terminates(denominator):
        return f"{sign}{whole}.{''.join(expansion)}"
    return f"{sign}{whole}.{''.join(islice(expansion, fractional_digits))}..."


def _expand(remainder: int, denominator: int) -> Iterator[str]:
    while remainder:
        digit, remainder = divmod(remainder * 10, denominator)
        yield str(digit)


def _terminates(denominator: int) -> bool:
    for factor in (2, 5):
        while denominator % factor == 0:
            denominator //= factor
    return denominator == 1