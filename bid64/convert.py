"""Conversions between decimal64 and Python's float and decimal.Decimal."""

from __future__ import annotations

import math
from decimal import Decimal

from .codec import (
    D64_INF,
    D64_NAN,
    D64_NEG_INF,
    KIND_INF,
    KIND_NAN,
    encode,
    unpack,
)
from .text import str_to_d64

# Digits targeted when converting from binary64
DOUBLE_DIGITS: int = 15


def _scale10(d: float, n: int) -> float:
    """d * 10**n, stepping so the power of ten itself stays finite."""
    while n > 308:
        d = d * 1e308
        n -= 308
    return d * math.pow(10.0, n)


def d64_to_double(a: int) -> float:
    """Approximate as binary64. Lossy past ~15 significant digits."""
    u = unpack(a)
    if u.kind == KIND_NAN:
        return math.nan
    if u.kind == KIND_INF:
        if u.sign:
            return -math.inf
        return math.inf
    result: float = 0.0
    if u.coef != 0:
        try:
            result = float(u.coef) * math.pow(10.0, u.exp)
        except OverflowError:
            result = math.inf
    if u.sign:
        return -result
    return result


def double_to_d64(d: float) -> int:
    if math.isnan(d):
        return D64_NAN
    if math.isinf(d):
        if d > 0:
            return D64_INF
        return D64_NEG_INF
    sign: int = 0
    if d < 0.0:
        sign = 1
        d = -d
    if d == 0.0:
        return encode(sign, 0, 0)
    exp: int = math.floor(math.log10(d)) - (DOUBLE_DIGITS - 1)
    coef: int = int(_scale10(d, -exp) + 0.5)
    return encode(sign, coef, exp)


def d64_to_decimal(a: int) -> Decimal:
    """Exact value as a decimal.Decimal, keeping the stored exponent."""
    u = unpack(a)
    if u.kind == KIND_NAN:
        return Decimal("NaN")
    if u.kind == KIND_INF:
        if u.sign:
            return Decimal("-Infinity")
        return Decimal("Infinity")
    digits = tuple(int(ch) for ch in str(u.coef))
    return Decimal((u.sign, digits, u.exp))


def decimal_to_d64(d: Decimal) -> int:
    """Convert through the text parser, so the 16-digit cap applies."""
    if d.is_nan():
        return D64_NAN
    return str_to_d64(str(d))
