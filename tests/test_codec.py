import io

import pytest

from ratnum.codec import (
    borsh_schema,
    dumps,
    from_bytes,
    from_json,
    json_schema,
    loads,
    read,
    size,
    to_bytes,
    to_json,
    write,
)
from ratnum.number import Number
from ratnum.varint import DecodeError


@pytest.mark.parametrize(
    "number, encoded",
    [
        (Number.from_ratio(2, 3), bytes([4, 3])),
        (Number(42), bytes([84, 1])),
        (Number.from_ratio(-2, 3), bytes([3, 3])),
    ],
)
def test_binary_form(number, encoded):
    assert to_bytes(number) == encoded
    assert size(number) == len(encoded)
    assert from_bytes(encoded) == number


def test_binary_supports_values_larger_than_u128():
    number = Number.parse("680564733841876926926749214863536422912/3")
    encoded = to_bytes(number)
    assert len(encoded) > 18
    assert size(number) == len(encoded)
    assert from_bytes(encoded) == number


def test_stream_round_trip_leaves_rest():
    stream = io.BytesIO()
    write(Number.from_ratio(2, 3), stream)
    write(Number(-7), stream)
    stream.seek(0)
    assert read(stream) == Number.from_ratio(2, 3)
    assert read(stream) == Number(-7)
    assert stream.read() == b""


def test_from_bytes_rejects_trailing_bytes():
    with pytest.raises(DecodeError, match="trailing"):
        from_bytes(bytes([4, 3, 0]))


def test_from_bytes_rejects_zero_denominator():
    with pytest.raises(DecodeError):
        from_bytes(bytes([4, 0]))


def test_from_bytes_rejects_truncated_input():
    with pytest.raises(EOFError):
        from_bytes(bytes([4]))


def test_json_serializes_as_string():
    number = Number.from_ratio(2, 3)
    encoded = dumps(number)
    assert encoded == '"2/3"'
    assert loads(encoded) == number
    assert to_json(Number(22) / 7) == "22/7"


def test_json_parses_decimal_number():
    assert loads("10.5") == Number(21) / 2


def test_json_parses_decimal_string():
    assert loads('"10.5"') == Number(21) / 2


def test_json_parses_integer():
    assert loads("10") == Number(10)


def test_json_rejects_invalid_values():
    with pytest.raises(ValueError, match="invalid rational"):
        from_json("abc")
    with pytest.raises(ValueError, match="invalid finite float"):
        from_json(float("inf"))
    with pytest.raises(TypeError):
        from_json(True)
    with pytest.raises(TypeError):
        from_json([1, 2])


def test_json_schema_is_string():
    schema = json_schema()
    assert schema["title"] == "Number"
    assert schema["type"] == "string"


def test_borsh_schema_is_two_varints():
    schema = borsh_schema()
    definitions = schema["definitions"]
    varint_definition = {
        "Sequence": {
            "length_width": 0,
            "length_range": (1, (1 << 64) - 1),
            "elements": "u8",
        }
    }
    assert schema["declaration"] == "Number"
    assert definitions["Number"] == {
        "Struct": {"fields": ["ZigZagVarint", "UnsignedVarint"]}
    }
    assert definitions["ZigZagVarint"] == varint_definition
    assert definitions["UnsignedVarint"] == varint_definition