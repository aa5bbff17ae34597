"""Binary form of exact rationals: a zigzag varint numerator and a varint denominator."""

from __future__ import annotations

from fractions import Fraction
from numbers import Rational
from typing import BinaryIO

_BASE = 128
_CONTINUE = 0x80
_DIGIT_MASK = 0x7F

INVALID_VARINT = "invalid arbitrary-size varint"
ZERO_DENOMINATOR = "rational denominator should not be zero"


class DecodeError(ValueError):
    """Raised when bytes do not hold a valid encoded rational."""


def _base128_digits(value: int) -> list[int]:
    digits = []
    while value:
        value, digit = divmod(value, _BASE)
        digits.append(digit)
    return digits or [0]


def _zigzag(value: Fraction) -> int:
    magnitude = abs(value.numerator)
    return magnitude * 2 - 1 if value < 0 else magnitude * 2


def _unzigzag(encoded: int) -> int:
    if encoded % 2 == 0:
        return encoded >> 1
    return -((encoded + 1) >> 1)


def _encode_unsigned(value: int) -> bytes:
    digits = _base128_digits(value)
    return bytes([digit | _CONTINUE for digit in digits[:-1]] + [digits[-1]])


def _decode_unsigned(stream: BinaryIO) -> int:
    value = 0
    shift = 0
    while True:
        chunk = stream.read(1)
        if not chunk:
            raise EOFError("unexpected end of encoded rational")
        byte = chunk[0]
        value |= (byte & _DIGIT_MASK) << shift
        shift += 7
        if not byte & _CONTINUE:
            return value


def encoded_size(value: Rational) -> int:
    """Number of bytes ``encode`` produces for ``value``."""
    value = Fraction(value)
    return len(_base128_digits(_zigzag(value))) + len(
        _base128_digits(value.denominator)
    )


def encode(value: Rational) -> bytes:
    """Encode ``value`` as two base-128 varints."""
    value = Fraction(value)
    return _encode_unsigned(_zigzag(value)) + _encode_unsigned(value.denominator)


def decode(stream: BinaryIO) -> Fraction:
    """Read one encoded rational from a binary stream.

    Raises EOFError on truncated input and DecodeError on a zero denominator.
    """
    numerator = _decode_unsigned(stream)
    denominator = _decode_unsigned(stream)
    if denominator == 0:
        raise DecodeError(ZERO_DENOMINATOR)
    return Fraction(_unzigzag(numerator), denominator)