# ratnum

Exact rational numbers with no casts, no rounding and no overflow. Use them
in property tests, fuzz setups and assertions to check numeric logic and the
limits of its rounding.

The package is a library only. It has no command-line tool.

## Installation

```
pip install ratnum
```

## Creating numbers

```python
from ratnum.number import Number
from ratnum.literal import num

Number(42)                   # 42
Number(0.5)                  # 1/2, the exact value of the float
Number.from_ratio(32, 12)    # 8/3
Number.parse("22/7")         # 22/7
Number.parse("-.125")        # -1/8
Number.parse("1.25e2")       # 125
Number.from_float(0.1)       # 3602879701896397/36028797018963968
Number.zero(), Number.one()

num("42")                    # 42
num("-42.21")                # -4221/100
num("1.5 / 0.25")            # 6
num("32 / -12")              # -8/3
num(True)                    # 1
num(False)                   # -1
num(None)                    # 0
```

`Number` accepts other `Number` values, integers, `fractions.Fraction` and
other rationals, and finite floats. `True` maps to `1`, `False` maps to `-1`
and `None` maps to `0`, so you can put a flag into a formula directly. A NaN
or an infinite float raises `ValueError`. `Number.from_ratio` raises
`ZeroDivisionError` when the denominator is zero.

`Number.parse` accepts `n`, `n/d`, and finite decimal or scientific
literals. Underscores are ignored in decimal literals. Any other text raises
`ValueError`. `Number.from_str_radix(text, 10)` does the same parse, and any
other radix raises `ValueError`.

The `num` function reads literal strings with 64-bit limits. Each part of a
literal must fit 64 unsigned bits, and when the result is negative the
numerator and the denominator must fit 64 signed bits. A part that exceeds
these limits raises `OverflowError`. Text that is not a valid literal raises
`ValueError`. Any value that is not a string goes to `Number`. The lower-level
helpers are in `ratnum.literal`: `parse_literal`, `from_literal`,
`from_ratio_literals` and `from_unsigned_ratio_parts`.

## Arithmetic

A `Number` works with `+`, `-`, `*`, `/` and `%`. The other operand can be a
number, an integer, a boolean, `None`, a rational or a float, and it can be
on either side of the operator:

```python
value = 44 / num(3) - (2**128 - 1) * num("2/3").pow(3) + True
ratio = num("9/8") / 2
Number(5) % 2                    # 1
```

Division by zero raises `ZeroDivisionError`. `%` gives the remainder of a
division that truncates toward zero. `pow(exponent)`, which is also `**`,
takes an integer exponent from -32768 to 32767, and the exponent can be
negative.

Other helpers are `abs()`, unary `-`, `is_zero()`, `is_one()`,
`is_positive()`, `is_negative()`, `signum()`, `inv()` (the reciprocal) and
`abs_sub(other)`. `abs_sub` returns `self - other`, or zero when that is not
positive.

A number compares and hashes like the equal `Fraction`. You can compare it
with other numbers, integers and rationals. It does not compare with
booleans or floats.

To sum an iterable, use `total`. It starts from zero:

```python
from ratnum.number import total

total([Number.from_ratio(1, 2), Number.from_ratio(1, 3), Number(2)])  # 17/6
total([])                                                             # 0
```

## Converting back

```python
from ratnum.number import IntegerKind

Number(255).to_integer(IntegerKind.U8)                # 255
Number(256).to_integer(IntegerKind.U8)                # raises TryFromNumberError
Number.from_ratio(3, 2).to_integer(IntegerKind.I64)   # raises TryFromNumberError
Number(0).to_nonzero_integer(IntegerKind.U8)          # raises TryFromNumberError
IntegerKind.I8.bounds()                               # (-128, 127)
```

The integer kinds are `I8`, `I16`, `I32`, `I64`, `I128`, `ISIZE`, `U8`, `U16`,
`U32`, `U64`, `U128` and `USIZE`. The size kinds are 64 bits wide.
`TryFromNumberError` is a subclass of `ValueError`.

The `numerator` and `denominator` properties return the parts in lowest
terms. `to_fraction()` returns a `fractions.Fraction`.

## Formatting

`str()` and the default `format()` give decimal digits. When the expansion
repeats, the output stops after 32 fractional digits and ends with `...`.
The `"#"` format spec gives the exact form, `n` or `n/d`. `repr()` shows the
exact form inside `Number(...)`.

```python
str(Number.from_ratio(1, 2))            # "0.5"
str(Number.from_ratio(32, 12))          # "2.66666666666666666666666666666666..."
format(Number.from_ratio(32, 12), "#")  # "8/3"
repr(Number.from_ratio(1, 2))           # "Number('1/2')"
```

Any other format spec raises `ValueError`. The same functions work on plain
fractions in `ratnum.text`: `parse_rational`, `parse_decimal`, `format_exact`
and `format_decimal(value, fractional_digits)`.

## Encoding

`ratnum.codec` writes a number as two base-128 varints. The first holds the
zigzag-encoded numerator and the second holds the denominator. Both can be
of any size.

```python
import io
from ratnum import codec

codec.to_bytes(Number.from_ratio(2, 3))   # b"\x04\x03"
codec.to_bytes(Number(42))                # b"T\x01"
codec.size(Number.from_ratio(2, 3))       # 2
codec.from_bytes(b"\x04\x03")             # 2/3

stream = io.BytesIO()
codec.write(Number(42), stream)
stream.seek(0)
codec.read(stream)                        # 42, following bytes stay unread
```

`from_bytes` requires exactly one encoded number. A zero denominator or
trailing bytes raise `ratnum.varint.DecodeError`, which is a subclass of
`ValueError`. Truncated input raises `EOFError`. The varint layer is also
available directly as `ratnum.varint.encode`, `decode` and `encoded_size`.

In JSON a number is written as its exact string:

```python
codec.dumps(Number.from_ratio(2, 3))      # '"2/3"'
codec.loads('"2/3"')                      # 2/3
codec.loads('"10.5"')                     # 21/2
codec.loads("10.5")                       # 21/2
codec.loads("10")                         # 10
codec.to_json(Number(7))                  # "7"
codec.from_json("22/7")                   # 22/7
```

An invalid rational string or a non-finite float raises `ValueError`. Any
other JSON value raises `TypeError`. `codec.json_schema()` describes the JSON
form as a string schema. `codec.borsh_schema()` describes the binary form as
two byte-sequence varints.