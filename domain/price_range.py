"""
Domain: Price ranges for the price histogram.

Ranges are defined strictly as:
  - 0-100:     price <= 100
  - 101-200:   100 < price <= 200
  - 201-300:   200 < price <= 300
  - 301-400:   300 < price <= 400
  - 401-500:   400 < price <= 500
  - 501-600:   500 < price <= 600
  - 601-700:   600 < price <= 700
  - 701-800:   700 < price <= 800
  - 801-900:   800 < price <= 900
  - 901-above: price > 900

Every price falls into exactly one range.
"""

from __future__ import annotations

from enum import Enum


class PriceRange(str, Enum):
    UP_TO_100 = "0-100"
    FROM_101_TO_200 = "101-200"
    FROM_201_TO_300 = "201-300"
    FROM_301_TO_400 = "301-400"
    FROM_401_TO_500 = "401-500"
    FROM_501_TO_600 = "501-600"
    FROM_601_TO_700 = "601-700"
    FROM_701_TO_800 = "701-800"
    FROM_801_TO_900 = "801-900"
    ABOVE_900 = "901-above"

    @staticmethod
    def for_price(price: float) -> "PriceRange":
        """Resolve the PriceRange for a price. Prices at or below 100 (negatives included) land in 0-100."""

        if price <= 100:
            return PriceRange.UP_TO_100
        if price <= 200:
            return PriceRange.FROM_101_TO_200
        if price <= 300:
            return PriceRange.FROM_201_TO_300
        if price <= 400:
            return PriceRange.FROM_301_TO_400
        if price <= 500:
            return PriceRange.FROM_401_TO_500
        if price <= 600:
            return PriceRange.FROM_501_TO_600
        if price <= 700:
            return PriceRange.FROM_601_TO_700
        if price <= 800:
            return PriceRange.FROM_701_TO_800
        if price <= 900:
            return PriceRange.FROM_801_TO_900
        return PriceRange.ABOVE_900
