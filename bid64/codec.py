"""Software decimal64 — IEEE 754-2008 BID encoding using only integer operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layer 1: Constants and bit manipulation
# ---------------------------------------------------------------------------

MASK64: int = 0xFFFFFFFFFFFFFFFF
D64_SIGN: int = 0x8000000000000000
D64_EXP_MASK: int = 0x7FE0000000000000
D64_COEF_MASK: int = 0x001FFFFFFFFFFFFF
D64_EXP_SHIFT: int = 53
D64_BIAS: int = 398
D64_EMIN: int = -398
D64_EMAX: int = 369

# Largest coefficient in the standard form: 2^53 - 1
D64_MAX_COEF: int = 9007199254740991

# Large-coefficient form: bits 62-61 = 11, implicit 2^53 prefix
D64_LARGE_SELECT: int = 0x6000000000000000
D64_LARGE_IMPLICIT: int = 0x0020000000000000
D64_LARGE_COEF_MASK: int = 0x0007FFFFFFFFFFFF

D64_SPECIAL_MASK: int = 0x7C00000000000000
D64_ZERO: int = 0x31C0000000000000
D64_NEG_ZERO: int = D64_SIGN | D64_ZERO
D64_ONE: int = 0x31C0000000000001
D64_NAN: int = 0x7C00000000000000
D64_INF: int = 0x7800000000000000
D64_NEG_INF: int = D64_SIGN | D64_INF

KIND_FINITE: str = "finite"
KIND_NAN: str = "nan"
KIND_INF: str = "inf"


def sign_d64(ui: int) -> int:
    return (ui >> 63) & 1


def is_nan(ui: int) -> bool:
    """Top five bits below the sign are 11111."""
    return (ui & D64_SPECIAL_MASK) == D64_SPECIAL_MASK


def is_inf(ui: int) -> bool:
    return (ui & D64_SPECIAL_MASK) == D64_INF


def is_finite(ui: int) -> bool:
    return (ui & D64_INF) != D64_INF


def is_signed(ui: int) -> bool:
    return sign_d64(ui) == 1


def is_large_form(ui: int) -> bool:
    return is_finite(ui) and (ui & D64_LARGE_SELECT) == D64_LARGE_SELECT


def signed_inf(sign: int) -> int:
    if sign:
        return D64_NEG_INF
    return D64_INF


def pack_d64(sign: int, exp: int, coef: int) -> int:
    """Pack a standard-form value. exp is unbiased and already in range."""
    return (
        ((sign & 1) << 63)
        | ((exp + D64_BIAS) << D64_EXP_SHIFT)
        | (coef & D64_COEF_MASK)
    )


# ---------------------------------------------------------------------------
# Layer 2: Tagged view
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Unpacked:
    """Decoded decimal64: kind tag plus sign/coefficient/exponent fields.

    For NaN and infinity only `sign` is meaningful; coef and exp are zero.
    """

    kind: str
    sign: int
    coef: int = 0
    exp: int = 0

    def is_finite(self) -> bool:
        return self.kind == KIND_FINITE

    def triple(self) -> tuple[int, int, int]:
        return (self.sign, self.coef, self.exp)


def unpack(ui: int) -> Unpacked:
    """Split a bit pattern into its tagged view. Accepts both coefficient forms."""
    sign: int = sign_d64(ui)
    if is_nan(ui):
        return Unpacked(KIND_NAN, sign)
    if is_inf(ui):
        return Unpacked(KIND_INF, sign)
    if (ui & D64_LARGE_SELECT) == D64_LARGE_SELECT:
        exp_hi: int = (ui >> 59) & 0x3
        exp_lo: int = (ui >> 51) & 0xFF
        exp: int = ((exp_hi << 8) | exp_lo) - D64_BIAS
        coef: int = D64_LARGE_IMPLICIT | (ui & D64_LARGE_COEF_MASK)
        return Unpacked(KIND_FINITE, sign, coef, exp)
    exp = ((ui & D64_EXP_MASK) >> D64_EXP_SHIFT) - D64_BIAS
    return Unpacked(KIND_FINITE, sign, ui & D64_COEF_MASK, exp)


def pack(u: Unpacked) -> int:
    if u.kind == KIND_NAN:
        return D64_NAN
    if u.kind == KIND_INF:
        return signed_inf(u.sign)
    return encode(u.sign, u.coef, u.exp)


# ---------------------------------------------------------------------------
# Layer 3: Encode / decode
# ---------------------------------------------------------------------------


def round_half_up_10(coef: int) -> int:
    """Drop one decimal digit, rounding half away from zero."""
    return (coef + 5) // 10


def reduce_coef(sign: int, coef: int, exp: int) -> tuple[int, int] | None:
    """Rescale until coef fits the standard form.

    Returns (coef, exp), or None when the exponent would pass D64_EMAX.
    """
    while coef > D64_MAX_COEF:
        if exp >= D64_EMAX:
            logger.debug("coefficient overflow at exponent %d, sign %d", exp, sign)
            return None
        coef = round_half_up_10(coef)
        exp += 1
    return (coef, exp)


def encode(sign: int, coef: int, exp: int) -> int:
    """Encode (sign, coefficient, exponent), normalising into range."""
    sign = sign & 1
    if coef == 0:
        if exp < D64_EMIN:
            exp = D64_EMIN
        if exp > D64_EMAX:
            exp = D64_EMAX
        return pack_d64(sign, exp, 0)
    reduced = reduce_coef(sign, coef, exp)
    if reduced is None:
        return signed_inf(sign)
    coef, exp = reduced
    # Underflow: shed digits (truncating) until the exponent is representable
    while exp < D64_EMIN:
        if coef == 0:
            break
        coef = coef // 10
        exp += 1
    if exp < D64_EMIN:
        exp = D64_EMIN
    if exp > D64_EMAX:
        exp = D64_EMAX
    return pack_d64(sign, exp, coef)


def decode(ui: int) -> tuple[int, int, int] | None:
    """Return (sign, coefficient, exponent), or None for NaN and infinity."""
    u = unpack(ui)
    if not u.is_finite():
        return None
    return u.triple()


# ---------------------------------------------------------------------------
# Layer 4: Sign operations
# ---------------------------------------------------------------------------


def negate(ui: int) -> int:
    """Flip the sign bit. NaN passes through unchanged."""
    if is_nan(ui):
        return ui
    return ui ^ D64_SIGN


def is_zero(ui: int) -> bool:
    u = unpack(ui)
    return u.is_finite() and u.coef == 0
