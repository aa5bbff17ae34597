"""Binary and JSON encodings of numbers, plus their schemas."""

from __future__ import annotations

import io
import json
import math
from typing import Any, BinaryIO

from ratnum import varint
from ratnum.number import Number
from ratnum.varint import DecodeError

_U64_MAX = (1 << 64) - 1
_SCHEMA_DESCRIPTION = (
    "Exact rational number encoded as a decimal integer or numerator/denominator string."
)


def size(value: Any) -> int:
    """Number of bytes the binary form of ``value`` takes."""
    return varint.encoded_size(Number(value).to_fraction())


def to_bytes(value: Any) -> bytes:
    """Binary form: a zigzag varint numerator followed by a varint denominator."""
    return varint.encode(Number(value).to_fraction())


def write(value: Any, stream: BinaryIO) -> None:
    """Write the binary form of ``value`` to a binary stream."""
    stream.write(to_bytes(value))


def read(stream: BinaryIO) -> Number:
    """Read one binary-encoded number, leaving any following bytes in the stream."""
    return Number(varint.decode(stream))


def from_bytes(data: bytes) -> Number:
    """Decode exactly one number; trailing bytes raise DecodeError."""
    stream = io.BytesIO(data)
    number = read(stream)
    if stream.read(1):
        raise DecodeError("trailing bytes after rational varints")
    return number


def to_json(value: Any) -> str:
    """JSON value of a number: its exact ``n`` or ``n/d`` string."""
    return format(Number(value), "#")


def from_json(value: Any) -> Number:
    """Number from a decoded JSON value: a rational string, an integer or a finite float."""
    if isinstance(value, str):
        try:
            return Number.parse(value)
        except ValueError:
            raise ValueError("invalid rational") from None
    if isinstance(value, bool):
        raise TypeError("expected a rational string or finite JSON number")
    if isinstance(value, int):
        return Number(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("invalid finite float")
        return Number.from_float(value)
    raise TypeError("expected a rational string or finite JSON number")


def dumps(value: Any) -> str:
    """JSON text of a number."""
    return json.dumps(to_json(value))


def loads(text: str) -> Number:
    """Number from JSON text."""
    return from_json(json.loads(text))


def json_schema() -> dict[str, str]:
    """JSON schema describing the JSON form."""
    return {
        "title": "Number",
        "type": "string",
        "description": _SCHEMA_DESCRIPTION,
    }


def borsh_schema() -> dict[str, Any]:
    """Declaration and definitions describing the binary form as two varints."""
    varint_definition = {
        "Sequence": {
            "length_width": 0,
            "length_range": (1, _U64_MAX),
            "elements": "u8",
        }
    }
    return {
        "declaration": "Number",
        "definitions": {
            "Number": {"Struct": {"fields": ["ZigZagVarint", "UnsignedVarint"]}},
            "ZigZagVarint": dict(varint_definition),
            "UnsignedVarint": dict(varint_definition),
            "u8": {"Primitive": 1},
        },
    }