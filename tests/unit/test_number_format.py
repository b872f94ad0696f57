"""Unit tests for short_form counter rendering."""

from __future__ import annotations

import pytest

from photopager.utils.number_format import short_form

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (_INT64_MIN, "0"),
        (-1, "0"),
        (0, "0"),
        (999, "999"),
        (1000, "1.0k"),
        (1001, "1.0k"),
        (1021, "1.02k"),
        (1221, "1.22k"),
        (6990, "6.99k"),
        (10000, "10.0k"),
        (10221, "10.2k"),
        (100122, "100k"),
        (101122, "101k"),
        (1000000, "1.0m"),
        (1000100, "1.0m"),
        (1001000, "1.0m"),
        (1010000, "1.01m"),
        (1100000, "1.1m"),
        (1110000, "1.11m"),
        (10010000, "10.0m"),
        (10110000, "10.1m"),
        (100110000, "100m"),
        (123000123, "123m"),
        (1000000000, "1.0b+"),
        (1000000001, "1.0b+"),
        (4333222111, "1.0b+"),
        (_INT64_MAX, "1.0b+"),
    ],
)
def test_short_form(value: int, expected: str) -> None:
    assert short_form(value) == expected
