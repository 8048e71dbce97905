"""Public decimal64 surface.

Bit patterns are plain ints in [0, 2**64). Arithmetic and conversions return a
Result whose flags are currently always FLAG_NONE; the rounding argument is
validated but the engine always rounds half away from zero.
"""

from __future__ import annotations

from . import codec
from .arith import d64_add, d64_div, d64_mul, d64_sub
from .convert import d64_to_double, double_to_d64
from .status import ROUND_NEAREST_EVEN, Result, check_rounding
from .text import d64_to_str, str_to_d64


def check_bits(v: int) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"decimal64 bit pattern must be int, not {type(v).__name__}")
    if v < 0 or v > codec.MASK64:
        raise ValueError(f"decimal64 bit pattern out of range: {v:#x}")
    return v


def check_triple(sign: int, coef: int, exp: int) -> None:
    for name, v in (("sign", sign), ("coefficient", coef), ("exponent", exp)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"{name} must be int, not {type(v).__name__}")
    if sign not in (0, 1):
        raise ValueError(f"sign must be 0 or 1, got {sign}")
    if coef < 0:
        raise ValueError(f"coefficient must be non-negative, got {coef}")


def encode(sign: int, coef: int, exp: int) -> int:
    check_triple(sign, coef, exp)
    return codec.encode(sign, coef, exp)


def decode(v: int) -> tuple[int, int, int] | None:
    return codec.decode(check_bits(v))


def add(a: int, b: int, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(d64_add(check_bits(a), check_bits(b)))


def sub(a: int, b: int, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(d64_sub(check_bits(a), check_bits(b)))


def mul(a: int, b: int, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(d64_mul(check_bits(a), check_bits(b)))


def div(a: int, b: int, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(d64_div(check_bits(a), check_bits(b)))


def to_double(a: int, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(d64_to_double(check_bits(a)))


def from_double(d: float, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(double_to_d64(float(d)))


def from_string(text: str | None, rounding: int = ROUND_NEAREST_EVEN) -> Result:
    check_rounding(rounding)
    return Result(str_to_d64(text))


def to_string(a: int) -> Result:
    return Result(d64_to_str(check_bits(a)))
