"""Decimal64 arithmetic: decode, operate on exact integers, re-encode.

Every precision-losing step rounds half away from zero. Infinite operands are
not combined; they produce NaN like any other operand that fails to decode.
"""

from __future__ import annotations

import logging

from .codec import (
    D64_EMIN,
    D64_MAX_COEF,
    D64_NAN,
    encode,
    negate,
    reduce_coef,
    round_half_up_10,
    signed_inf,
    unpack,
)

logger = logging.getLogger(__name__)

# Numerator headroom for division: keeps up to sixteen quotient digits
DIV_SCALE: int = 10**15


def align(ca: int, ea: int, cb: int, eb: int) -> tuple[int, int, int]:
    """Bring two coefficients to a common exponent. Returns (ca, cb, exp).

    The operand with the larger exponent is scaled up while its coefficient
    stays representable. Any remaining gap is closed by shedding digits from
    the other operand.
    """
    limit: int = D64_MAX_COEF // 10
    while ea > eb and ca <= limit:
        ca = ca * 10
        ea -= 1
    while eb > ea and cb <= limit:
        cb = cb * 10
        eb -= 1
    while ea > eb:
        cb = round_half_up_10(cb)
        eb += 1
        if cb == 0:
            eb = ea
    while eb > ea:
        ca = round_half_up_10(ca)
        ea += 1
        if ca == 0:
            ea = eb
    return (ca, cb, ea)


def d64_add(a: int, b: int) -> int:
    ua = unpack(a)
    ub = unpack(b)
    if not ua.is_finite() or not ub.is_finite():
        return D64_NAN
    ca, cb, exp = align(ua.coef, ua.exp, ub.coef, ub.exp)
    if ua.sign == ub.sign:
        return encode(ua.sign, ca + cb, exp)
    if ca > cb:
        return encode(ua.sign, ca - cb, exp)
    if cb > ca:
        return encode(ub.sign, cb - ca, exp)
    # Exact cancellation is a positive zero
    return encode(0, 0, exp)


def d64_sub(a: int, b: int) -> int:
    return d64_add(a, negate(b))


def d64_mul(a: int, b: int) -> int:
    ua = unpack(a)
    ub = unpack(b)
    if not ua.is_finite() or not ub.is_finite():
        return D64_NAN
    sign: int = ua.sign ^ ub.sign
    reduced = reduce_coef(sign, ua.coef * ub.coef, ua.exp + ub.exp)
    if reduced is None:
        return signed_inf(sign)
    return encode(sign, reduced[0], reduced[1])


def d64_div(a: int, b: int) -> int:
    """Quotient with up to sixteen significant digits, truncated.

    A zero divisor yields NaN, not a signed infinity.
    """
    ua = unpack(a)
    ub = unpack(b)
    if not ua.is_finite() or not ub.is_finite():
        return D64_NAN
    if ub.coef == 0:
        logger.debug("division by zero coefficient")
        return D64_NAN
    sign: int = ua.sign ^ ub.sign
    exp: int = ua.exp - ub.exp
    num: int = ua.coef
    bound: int = ub.coef * DIV_SCALE
    while num < bound and exp > D64_EMIN:
        num = num * 10
        exp -= 1
    return encode(sign, num // ub.coef, exp)
