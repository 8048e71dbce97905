"""Public surface: Result/flags contract, argument checking, package exports."""

import logging
import math
from decimal import Decimal

import pytest

import bid64
from bid64 import (
    D64_NAN,
    D64_ONE,
    D64_ZERO,
    FLAG_INEXACT,
    FLAG_NONE,
    FLAG_OVERFLOW,
    ROUND_NEAREST_AWAY,
    ROUND_UP,
    Result,
)


def test_worked_examples():
    a = bid64.from_string("1.50").value
    assert bid64.to_string(a).value == "+1.5E+0"
    total = bid64.add(bid64.from_string("1.5").value, bid64.from_string("2.5").value)
    assert bid64.to_string(total.value).value == "+4E+0"
    product = bid64.mul(bid64.from_string("2").value, bid64.from_string("3.5").value)
    assert bid64.to_string(product.value).value == "+7E+0"


def test_every_call_reports_no_flags():
    one = D64_ONE
    results = [
        bid64.add(one, one),
        bid64.sub(one, one),
        bid64.mul(one, one),
        bid64.div(one, D64_ZERO),
        bid64.to_double(one),
        bid64.from_double(0.1),
        bid64.from_string("garbage"),
        bid64.to_string(D64_NAN),
    ]
    for result in results:
        assert isinstance(result, Result)
        assert result.flags == FLAG_NONE
        assert not result.raised(FLAG_INEXACT)
        assert result.flag_names() == []


def test_result_unpacks():
    value, flags = bid64.div(D64_ONE, D64_ZERO)
    assert value == D64_NAN
    assert flags == FLAG_NONE


def test_result_flag_names():
    result = Result(D64_NAN, FLAG_OVERFLOW | FLAG_INEXACT)
    assert result.raised(FLAG_OVERFLOW)
    assert result.flag_names() == ["overflow", "inexact"]


def test_rounding_mode_accepted_and_ignored():
    a = bid64.from_string("2").value
    b = bid64.from_string("3").value
    default = bid64.div(a, b).value
    assert bid64.div(a, b, rounding=ROUND_UP).value == default
    assert bid64.div(a, b, rounding=ROUND_NEAREST_AWAY).value == default


def test_unknown_rounding_mode():
    with pytest.raises(ValueError):
        bid64.add(D64_ONE, D64_ONE, rounding=9)


@pytest.mark.parametrize("bad", ["1", 1.0, None, True])
def test_bit_pattern_type_checked(bad):
    with pytest.raises(TypeError):
        bid64.add(bad, D64_ONE)


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_bit_pattern_range_checked(bad: int):
    with pytest.raises(ValueError):
        bid64.to_string(bad)
    with pytest.raises(ValueError):
        bid64.decode(bad)


@pytest.mark.parametrize(
    "sign,coef,exp",
    [(0, -1, 0), (1, -(2**53), 10), (2, 1, 0), (-1, 1, 0)],
)
def test_encode_triple_range_checked(sign: int, coef: int, exp: int):
    with pytest.raises(ValueError):
        bid64.encode(sign, coef, exp)


@pytest.mark.parametrize(
    "sign,coef,exp",
    [(0, 1.5, 0), (0, 1, "0"), (True, 1, 0), (0, None, 0)],
)
def test_encode_triple_type_checked(sign, coef, exp):
    with pytest.raises(TypeError):
        bid64.encode(sign, coef, exp)


def test_encode_decode():
    bits = bid64.encode(1, 123456, -3)
    assert bid64.decode(bits) == (1, 123456, -3)
    assert bid64.decode(bid64.D64_INF) is None


def test_conversions():
    assert bid64.to_double(bid64.encode(0, 25, -1)).value == 2.5
    assert bid64.to_string(bid64.from_double(2.5).value).value == "+2.5E+0"
    assert math.isnan(bid64.to_double(bid64.UNSET_DECIMAL).value)
    assert bid64.to_decimal(bid64.encode(0, 25, -1)) == Decimal("2.5")
    assert bid64.from_decimal(Decimal("2.5")) == bid64.encode(0, 25, -1)
    assert bid64.to_display(bid64.encode(0, 25, -1)) == "2.5"


def test_exceptional_paths_are_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="bid64"):
        bid64.div(D64_ONE, D64_ZERO)
        bid64.from_string("1?2")
        bid64.mul(
            bid64.encode(0, bid64.D64_MAX_COEF, bid64.D64_EMAX),
            bid64.encode(0, bid64.D64_MAX_COEF, bid64.D64_EMAX),
        )
    assert "division by zero" in caplog.text
    assert "skipped 1 unrecognized" in caplog.text
    assert "coefficient overflow" in caplog.text
