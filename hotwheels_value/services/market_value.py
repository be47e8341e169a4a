"""
Market value statistics over a set of sold listings.

The recommended value blends the mean of the prices that survive an
interquartile-range outlier filter with the overall median.
"""

import random
from typing import List, Optional, Sequence

from ..models import Listing, MarketValue


IQR_MULTIPLIER = 1.5
FILTERED_MEAN_WEIGHT = 0.6
MEDIAN_WEIGHT = 0.4

# priceChange is a placeholder in [-5%, +5%] until a trend source exists
PRICE_CHANGE_LIMIT = 5.0


def median_price(prices: Sequence[float]) -> float:
    """Median of a non-empty, ascending price list."""
    count = len(prices)
    middle = count // 2
    if count % 2 == 0:
        return (prices[middle - 1] + prices[middle]) / 2
    return prices[middle]


def filter_outliers(prices: Sequence[float]) -> List[float]:
    """Drop prices outside the 1.5 * IQR band.

    Quartiles are read directly by index from the ascending list
    (``floor(n * 0.25)`` and ``floor(n * 0.75)``), not interpolated.
    """
    count = len(prices)
    q1 = prices[count // 4]
    q3 = prices[(3 * count) // 4]
    iqr = q3 - q1

    lower_bound = q1 - IQR_MULTIPLIER * iqr
    upper_bound = q3 + IQR_MULTIPLIER * iqr

    return [price for price in prices if lower_bound <= price <= upper_bound]


def calculate_market_value(
    listings: Sequence[Listing],
    query: str,
    rng: Optional[random.Random] = None
) -> MarketValue:
    """
    Summarize listing prices into a MarketValue.

    Args:
        listings: Sold listings, in any order
        query: Originating search query, reported as ``model``
        rng: Random source for the price-change placeholder (optional)

    Returns:
        MarketValue; all zeros when ``listings`` is empty
    """
    if not listings:
        return MarketValue(model=query)

    prices = sorted(listing.price for listing in listings)
    total_listings = len(prices)

    average = sum(prices) / total_listings
    median = median_price(prices)

    filtered = filter_outliers(prices)
    if filtered:
        filtered_average = sum(filtered) / len(filtered)
        recommended = filtered_average * FILTERED_MEAN_WEIGHT + median * MEDIAN_WEIGHT
    else:
        recommended = median

    rng = rng or random.Random()
    price_change = rng.uniform(-PRICE_CHANGE_LIMIT, PRICE_CHANGE_LIMIT)

    return MarketValue(
        average_price=average,
        median_price=median,
        min_price=prices[0],
        max_price=prices[-1],
        recommended_value=recommended,
        total_listings=total_listings,
        price_change=price_change,
        model=query,
    )
