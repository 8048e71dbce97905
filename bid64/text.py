"""Decimal64 text: permissive literal parser and canonical scientific formatter.

The canonical form is a single leading digit, optional fraction with trailing
zeros removed, and an explicit signed exponent: "+1.5E+2", "-7E-3", "+0E+0".
"""

from __future__ import annotations

import logging

from .codec import D64_NAN, D64_ZERO, KIND_INF, KIND_NAN, encode, signed_inf, unpack

logger = logging.getLogger(__name__)

# Coefficient digits kept while parsing; the rest are dropped
MAX_DIGITS: int = 16

# Lexer states
ST_INT = "INT"
ST_FRAC = "FRAC"
ST_EXP_SIGN = "EXP_SIGN"
ST_EXP_DIGITS = "EXP_DIGITS"


def _special(s: str, i: int, sign: int) -> int | None:
    head: str = s[i : i + 3].lower()
    if head == "nan":
        return D64_NAN
    if head == "inf":
        return signed_inf(sign)
    return None


def str_to_d64(s: str | None) -> int:
    """Parse a decimal literal. Never fails: unknown characters are skipped."""
    if s is None or s == "":
        return D64_ZERO
    n: int = len(s)
    i: int = 0
    sign: int = 0
    if s[0] == "-":
        sign = 1
        i = 1
    elif s[0] == "+":
        i = 1
    special = _special(s, i, sign)
    if special is not None:
        return special
    coef: int = 0
    exp: int = 0
    digits: int = 0
    exp_sign: int = 1
    exp_val: int = 0
    skipped: int = 0
    state: str = ST_INT
    while i < n:
        c = s[i]
        if state == ST_INT or state == ST_FRAC:
            if c == "E" or c == "e":
                state = ST_EXP_SIGN
            elif c == ".":
                state = ST_FRAC
            elif "0" <= c <= "9":
                if digits < MAX_DIGITS:
                    coef = coef * 10 + (ord(c) - 48)
                    # leading zeros are not significant
                    if coef != 0:
                        digits += 1
                    if state == ST_FRAC:
                        exp -= 1
                elif state == ST_INT:
                    exp += 1
            else:
                skipped += 1
        elif state == ST_EXP_SIGN:
            state = ST_EXP_DIGITS
            if c == "-":
                exp_sign = -1
            elif c != "+":
                continue
        elif "0" <= c <= "9":
            exp_val = exp_val * 10 + (ord(c) - 48)
        else:
            break
        i += 1
    if skipped > 0:
        logger.debug("skipped %d unrecognized characters in %r", skipped, s)
    return encode(sign, coef, exp + exp_sign * exp_val)


def d64_to_str(a: int) -> str:
    u = unpack(a)
    if u.kind == KIND_NAN:
        return "+NaN"
    if u.kind == KIND_INF:
        if u.sign:
            return "-Inf"
        return "+Inf"
    sign_ch: str = "-" if u.sign else "+"
    if u.coef == 0:
        return sign_ch + "0E+0"
    digits: str = str(u.coef)
    adjusted: int = u.exp + len(digits) - 1
    mantissa: str = digits.rstrip("0")
    out: str = sign_ch + mantissa[0]
    if len(mantissa) > 1:
        out += "." + mantissa[1:]
    return f"{out}E{adjusted:+d}"
