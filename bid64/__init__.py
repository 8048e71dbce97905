"""Software decimal64 (IEEE 754-2008, Binary Integer Decimal) for broker wire values."""

from .api import (
    add,
    check_bits,
    decode,
    div,
    encode,
    from_double,
    from_string,
    mul,
    sub,
    to_double,
    to_string,
)
from .codec import (
    D64_EMAX,
    D64_EMIN,
    D64_INF,
    D64_MAX_COEF,
    D64_NAN,
    D64_NEG_INF,
    D64_NEG_ZERO,
    D64_ONE,
    D64_ZERO,
    Unpacked,
    is_finite,
    is_inf,
    is_nan,
    is_signed,
    is_zero,
    negate,
    pack,
    unpack,
)
from .convert import d64_to_decimal as to_decimal
from .convert import decimal_to_d64 as from_decimal
from .status import (
    FLAG_DENORMAL,
    FLAG_INEXACT,
    FLAG_INVALID,
    FLAG_NONE,
    FLAG_OVERFLOW,
    FLAG_UNDERFLOW,
    FLAG_ZERO_DIVIDE,
    ROUND_DOWN,
    ROUND_NEAREST_AWAY,
    ROUND_NEAREST_EVEN,
    ROUND_TO_ZERO,
    ROUND_UP,
    Result,
)
from .wire import UNSET_DECIMAL, decode_field, encode_field, is_unset
from .wire import d64_to_display as to_display

__all__ = [
    "D64_EMAX",
    "D64_EMIN",
    "D64_INF",
    "D64_MAX_COEF",
    "D64_NAN",
    "D64_NEG_INF",
    "D64_NEG_ZERO",
    "D64_ONE",
    "D64_ZERO",
    "FLAG_DENORMAL",
    "FLAG_INEXACT",
    "FLAG_INVALID",
    "FLAG_NONE",
    "FLAG_OVERFLOW",
    "FLAG_UNDERFLOW",
    "FLAG_ZERO_DIVIDE",
    "ROUND_DOWN",
    "ROUND_NEAREST_AWAY",
    "ROUND_NEAREST_EVEN",
    "ROUND_TO_ZERO",
    "ROUND_UP",
    "Result",
    "UNSET_DECIMAL",
    "Unpacked",
    "add",
    "check_bits",
    "decode",
    "decode_field",
    "div",
    "encode",
    "encode_field",
    "from_decimal",
    "from_double",
    "from_string",
    "is_finite",
    "is_inf",
    "is_nan",
    "is_signed",
    "is_unset",
    "is_zero",
    "mul",
    "negate",
    "pack",
    "sub",
    "to_decimal",
    "to_display",
    "to_double",
    "to_string",
    "unpack",
]
