"""Decimal64 at the protocol boundary.

Broker messages carry decimals as plain positional text, and an absent value
as an empty field. In memory the absent value is UNSET_DECIMAL, a NaN pattern.
"""

from __future__ import annotations

import re

from .codec import KIND_INF, KIND_NAN, unpack
from .text import str_to_d64

UNSET_DECIMAL: int = 0x7FFFFFFFFFFFFFFF

_FIELD_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|-?Infinity")


def is_unset(ui: int) -> bool:
    return ui == UNSET_DECIMAL


def d64_to_display(a: int) -> str:
    """Plain notation without exponent: "150", "1.5", "-0.001", "0".

    NaN (including UNSET_DECIMAL) renders as the empty string.
    """
    u = unpack(a)
    if u.kind == KIND_NAN:
        return ""
    if u.kind == KIND_INF:
        if u.sign:
            return "-Infinity"
        return "Infinity"
    if u.coef == 0:
        return "0"
    digits: str = str(u.coef)
    stripped: str = digits.rstrip("0")
    exp: int = u.exp + len(digits) - len(stripped)
    digits = stripped
    if exp >= 0:
        body = digits + "0" * exp
    elif -exp < len(digits):
        body = digits[:exp] + "." + digits[exp:]
    else:
        body = "0." + "0" * (-exp - len(digits)) + digits
    if u.sign:
        return "-" + body
    return body


def encode_field(a: int) -> str:
    if is_unset(a):
        return ""
    return d64_to_display(a)


def decode_field(text: str | None) -> int:
    """Parse a field; missing or malformed text gives UNSET_DECIMAL."""
    if text is None:
        return UNSET_DECIMAL
    text = text.strip()
    if _FIELD_RE.fullmatch(text) is None:
        return UNSET_DECIMAL
    return str_to_d64(text)
