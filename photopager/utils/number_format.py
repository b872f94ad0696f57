"""Compact rendering of engagement counters (views, votes, comments).

``short_form`` keeps at most three significant digits and pegs the value to
the nearest power of 1000::

    6990      -> "6.99k"
    123456    -> "123k"
    123       -> "123"
    123000123 -> "123m"
    4333222111 -> "1.0b+"

Anything at or past the last marker collapses to ``"1.0<marker>+"``.
"""

from __future__ import annotations

_ABBREVIATED_NUMBER_MARKERS = ("", "k", "m", "b")


def short_form(value: int) -> str:
    """Return a 1-3 digit representation of *value* with a magnitude suffix."""
    if value <= 0:
        return "0"

    # Digit count is exact for ints, unlike log10 on large values.
    powers_of_ten = len(str(value)) - 1
    powers_of_thousand = powers_of_ten // 3

    if powers_of_thousand >= len(_ABBREVIATED_NUMBER_MARKERS) - 1:
        return f"1.0{_ABBREVIATED_NUMBER_MARKERS[-1]}+"

    if powers_of_thousand == 0:
        return str(value)

    shortened = value / (10 ** (3 * powers_of_thousand))
    text = f"{shortened:.{2 - powers_of_ten % 3}f}"

    # Drop one trailing zero, but keep a lone ".0"
    if "." in text and not text.endswith(".0") and text.endswith("0"):
        text = text[:-1]

    return text + _ABBREVIATED_NUMBER_MARKERS[powers_of_thousand]
