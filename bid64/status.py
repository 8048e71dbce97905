"""Rounding modes, exception flags, and the Result type returned by the API.

Numbering follows the Intel decimal library so values can be passed through
unchanged. The engine always rounds half away from zero and never raises a
flag; both are carried so callers keep a stable contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

ROUND_NEAREST_EVEN: int = 0
ROUND_DOWN: int = 1
ROUND_UP: int = 2
ROUND_TO_ZERO: int = 3
ROUND_NEAREST_AWAY: int = 4

ROUNDING_MODES: dict[int, str] = {
    ROUND_NEAREST_EVEN: "nearest-even",
    ROUND_DOWN: "down",
    ROUND_UP: "up",
    ROUND_TO_ZERO: "to-zero",
    ROUND_NEAREST_AWAY: "nearest-away",
}

FLAG_NONE: int = 0x00
FLAG_INVALID: int = 0x01
FLAG_DENORMAL: int = 0x02
FLAG_ZERO_DIVIDE: int = 0x04
FLAG_OVERFLOW: int = 0x08
FLAG_UNDERFLOW: int = 0x10
FLAG_INEXACT: int = 0x20

FLAG_NAMES: dict[int, str] = {
    FLAG_INVALID: "invalid",
    FLAG_DENORMAL: "denormal",
    FLAG_ZERO_DIVIDE: "zero-divide",
    FLAG_OVERFLOW: "overflow",
    FLAG_UNDERFLOW: "underflow",
    FLAG_INEXACT: "inexact",
}


@dataclass(frozen=True)
class Result:
    """Value of an operation plus the exception flags it raised."""

    value: int | float | str
    flags: int = FLAG_NONE

    def __iter__(self) -> Iterator[object]:
        return iter((self.value, self.flags))

    def raised(self, flag: int) -> bool:
        return (self.flags & flag) != 0

    def flag_names(self) -> list[str]:
        return [name for bit, name in FLAG_NAMES.items() if self.flags & bit]


def check_rounding(rounding: int) -> int:
    if rounding not in ROUNDING_MODES:
        raise ValueError(f"unknown rounding mode {rounding!r}")
    return rounding
