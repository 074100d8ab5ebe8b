"""
Domain: Calendar months used by the month filter.

Rules implemented here:
- A month filter matches records whose date_of_sale (UTC) falls in that
  calendar month, in any year.
- API input may be a number ("3") or an English month name, full or
  abbreviated, in any case ("March", "mar").
- Blank input means "no month filter".
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @staticmethod
    def parse(value: Optional[str | int]) -> Optional["Month"]:
        """
        Resolve a Month from API input.

        Returns None when no month was given.

        Raises:
            ValueError: Input is neither a month number 1-12 nor a month name
        """

        if value is None:
            return None
        if isinstance(value, int):
            return Month(value)

        text = value.strip()
        if not text:
            return None
        if text.isdigit():
            return Month(int(text))

        name = text.upper()
        for month in Month:
            if name == month.name or (len(name) == 3 and month.name.startswith(name)):
                return month
        raise ValueError(f"Unrecognized month: {value!r}")
