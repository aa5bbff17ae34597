from fractions import Fraction

import pytest

from ratnum.literal import (
    from_literal,
    from_ratio_literals,
    from_unsigned_ratio_parts,
    num,
    parse_literal,
)
from ratnum.number import Number

I64_MIN = -(1 << 63)
U64_MAX = (1 << 64) - 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-1231232312311232123", Number(-1231232312311232123)),
        ("-9223372036854775808", Number(I64_MIN)),
        ("0", Number(0)),
        ("123123123", Number(123123123)),
        ("18446744073709551615", Number(U64_MAX)),
        ("32 / 12", Number.from_ratio(32, 12)),
        ("-32 / 12", Number.from_ratio(-32, 12)),
        ("32 / -12", Number.from_ratio(-32, 12)),
        ("-32 / -12", Number.from_ratio(32, 12)),
        ("42.21 / 3", Number.from_ratio(4221, 300)),
        ("1 / 2.5", Number.from_ratio(10, 25)),
        ("1.5 / 0.25", Number.from_ratio(1500, 250)),
        ("42.21", Number.from_ratio(4221, 100)),
        ("-42.21", Number.from_ratio(-4221, 100)),
        ("1_000.050", Number.from_ratio(1_000_050, 1000)),
    ],
)
def test_num_literals(text, expected):
    assert num(text) == expected


def test_construction_formats():
    assert num("42") == Number(42)
    assert num("-42") == Number(-42)
    assert num("42.21") == Number.from_ratio(4221, 100)
    assert num("32 / 12") == Number.from_ratio(32, 12)
    assert num("1.5 / 0.25") == Number(6)


def test_num_with_convertible_values():
    two = 2
    numerator = 6
    denominator = 4
    assert num(two) == Number(2)
    assert num(two + 3) == Number(5)
    assert num(False) == Number(-1)
    assert num(True) == Number(1)
    assert num(None) == Number(0)
    assert num((1 << 128) - 1) == Number((1 << 128) - 1)
    assert num(Fraction(3, 2)) == Number.from_ratio(3, 2)
    assert num(numerator) / denominator == Number.from_ratio(3, 2)
    assert -num(numerator) / denominator == Number.from_ratio(-3, 2)


def test_formulas():
    input_value = 44
    fee_enabled = True
    ratio = num(9) / 8
    adjusted = num(9 + 3) / (8 - 2)

    weighted = input_value / num("3") - ((1 << 128) - 1) * num("2 / 3").pow(3)
    raw_literal_start = 100 / num("4") + 3
    raw_variable_start = input_value + Number(1)
    signed_adjustment = fee_enabled * num("5 / 2") + False
    composed = (weighted + signed_adjustment) * ratio / adjusted

    assert raw_literal_start == Number(28)
    assert raw_variable_start == Number(45)
    assert ratio == Number.from_ratio(9, 8)
    assert adjusted == Number(2)
    assert format(composed, "#") == "-1814839290245005138471331239636097127469/32"


def test_parse_literal_parts():
    assert parse_literal("42") == (42, 1)
    assert parse_literal("42.21") == (4221, 100)
    assert parse_literal("1_000.050") == (1000050, 1000)


@pytest.mark.parametrize("text", ["", "_", ".", "1.2.3", "abc", "-1", "1e3"])
def test_parse_literal_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_literal(text)


def test_parse_literal_rejects_overflow():
    with pytest.raises(OverflowError):
        parse_literal("18446744073709551616")
    with pytest.raises(OverflowError):
        parse_literal("0." + "0" * 20)


def test_from_literal_sign():
    assert from_literal("2.5", True) == Number.from_ratio(-5, 2)
    assert from_literal("2.5", False) == Number.from_ratio(5, 2)


def test_from_ratio_literals_errors():
    with pytest.raises(ZeroDivisionError):
        from_ratio_literals("1", False, "0", False)
    with pytest.raises(ZeroDivisionError):
        num("1 / 0.0")
    with pytest.raises(OverflowError):
        from_ratio_literals("18446744073709551615", False, "0.5", False)


def test_from_unsigned_ratio_parts():
    assert from_unsigned_ratio_parts(2, 3, False) == Number.from_ratio(2, 3)
    assert from_unsigned_ratio_parts(22, 7, True) == Number.from_ratio(-22, 7)
    assert from_unsigned_ratio_parts(1 << 63, 1, True) == Number(I64_MIN)
    assert from_unsigned_ratio_parts(44, 14, False) == Number.from_ratio(22, 7)


def test_from_unsigned_ratio_parts_limits():
    with pytest.raises(ZeroDivisionError):
        from_unsigned_ratio_parts(1, 0, False)
    with pytest.raises(OverflowError):
        from_unsigned_ratio_parts((1 << 63) + 1, 1, True)
    with pytest.raises(OverflowError):
        from_unsigned_ratio_parts(1, 1 << 63, True)
    with pytest.raises(OverflowError):
        num("-18446744073709551615")