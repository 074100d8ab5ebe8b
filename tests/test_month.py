"""
Tests for `domain/month.py`.

Covers rules:
- Months are accepted as numbers 1-12 or English names (full or 3-letter).
- Blank input means no month filter.
- Anything else is rejected with ValueError.
"""

from __future__ import annotations

import pytest

from domain.month import Month


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1", Month.JANUARY),
        ("03", Month.MARCH),
        (" 12 ", Month.DECEMBER),
        (4, Month.APRIL),
        ("March", Month.MARCH),
        ("march", Month.MARCH),
        ("SEP", Month.SEPTEMBER),
        ("may", Month.MAY),
        ("Jun", Month.JUNE),
    ],
)
def test_month_parse_accepts_numbers_and_names(value, expected: Month) -> None:
    assert Month.parse(value) == expected


@pytest.mark.parametrize("value", [None, "", "   "])
def test_month_parse_blank_means_no_filter(value) -> None:
    assert Month.parse(value) is None


@pytest.mark.parametrize("value", ["0", "13", "-1", "Mars", "ma", "abc", 13])
def test_month_parse_rejects_unknown_values(value) -> None:
    with pytest.raises(ValueError):
        Month.parse(value)
