"""Tests for numeric conversion of option values."""

import math

import pytest

from cmdspec.conversions import to_int32, to_int64, to_real


@pytest.mark.parametrize(
    ("token", "expected"),
    [("5", 5), ("-12", -12), ("+7", 7), ("2147483647", 2147483647), ("-2147483648", -2147483648)],
)
def test_to_int32_accepts_in_range(token: str, expected: int) -> None:
    assert to_int32(token) == expected


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "1.5", "", " 5", "1_000", "0x10", "five"])
def test_to_int32_rejects(token: str) -> None:
    assert to_int32(token) is None


def test_to_int64_accepts_beyond_int32() -> None:
    assert to_int64("2147483648") == 2147483648
    assert to_int64("9223372036854775807") == 2**63 - 1


def test_to_int64_rejects_overflow() -> None:
    assert to_int64("9223372036854775808") is None


def test_to_real_accepts_common_forms() -> None:
    assert to_real("1.5") == 1.5
    assert to_real("-2") == -2.0
    assert to_real("1e3") == 1000.0
    assert math.isinf(to_real("inf"))


@pytest.mark.parametrize("token", ["", "abc", " 1.5", "1.5 ", "1_0.5", "1.2.3"])
def test_to_real_rejects(token: str) -> None:
    assert to_real(token) is None
