"""
Synthetic completed-sale listings for running without an eBay API key.

Listings have the same shape as real results and go through the same
market value calculation. Pass a seeded ``random.Random`` for reproducible
output.
"""

import math
import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlencode

from ...models import Listing, ListingsResponse, SearchParams
from ..market_value import calculate_market_value


MOCK_TOTAL_LISTINGS = 47
MOCK_PAGE_SIZE = 12

CONDITIONS = ["New", "Used", "Mint", "Unopened"]
COLORS = ["Red", "Blue", "Green", "Yellow", "Black", "Chrome", "White"]

MIN_MODEL_YEAR = 1990
MAX_MODEL_YEAR = 2022
MIN_PRICE = 5.0
MAX_PRICE = 35.0
MIN_SHIPPING = 2.0
MAX_SHIPPING = 8.0
SHIPPING_PROBABILITY = 0.7
SOLD_WITHIN_DAYS = 30

SOLD_SEARCH_URL = "https://www.ebay.com/sch/i.html"


def sold_search_url(query: str) -> str:
    """eBay sold-items search page for ``query``."""
    return f"{SOLD_SEARCH_URL}?{urlencode({'_nkw': query, 'LH_Sold': 1, 'LH_Complete': 1})}"


def generate_mock_listing(
    query: str,
    rng: random.Random,
    now: Optional[datetime] = None
) -> Listing:
    """Generate one synthetic sold listing for ``query``."""
    now = now or datetime.now(timezone.utc)

    color = rng.choice(COLORS)
    condition = rng.choice(CONDITIONS)
    year = rng.randint(MIN_MODEL_YEAR, MAX_MODEL_YEAR)

    price = round(rng.uniform(MIN_PRICE, MAX_PRICE), 2)
    shipping = None
    if rng.random() < SHIPPING_PROBABILITY:
        shipping = round(rng.uniform(MIN_SHIPPING, MAX_SHIPPING), 2)

    sold_at = now - timedelta(days=rng.randrange(SOLD_WITHIN_DAYS))

    return Listing(
        id=str(uuid.UUID(int=rng.getrandbits(128), version=4)),
        title=f"Hot Wheels {query} {color} Edition {year}",
        condition=condition,
        price=price,
        shipping=shipping,
        image_url=None,
        listing_url=sold_search_url(query),
        sold_date=sold_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )


def generate_mock_data(
    params: SearchParams,
    rng: Optional[random.Random] = None,
    total_listings: int = MOCK_TOTAL_LISTINGS,
    page_size: int = MOCK_PAGE_SIZE
) -> ListingsResponse:
    """
    Build a page of synthetic search results.

    Only the requested page's slice of the fixed-size corpus is generated;
    pages past the end of the corpus come back empty.

    Args:
        params: Validated search parameters; only query and page are used
        rng: Random source (optional, seeded for deterministic output)
        total_listings: Size of the synthetic corpus
        page_size: Listings per page

    Returns:
        ListingsResponse for the requested page
    """
    rng = rng or random.Random()
    current_page = params.page or 1
    total_pages = math.ceil(total_listings / page_size)

    start_index = (current_page - 1) * page_size
    end_index = min(start_index + page_size, total_listings)
    item_count = max(0, end_index - start_index)

    now = datetime.now(timezone.utc)
    listings = [generate_mock_listing(params.query, rng, now) for _ in range(item_count)]

    return ListingsResponse(
        listings=listings,
        total_listings=total_listings,
        current_page=current_page,
        total_pages=total_pages,
        market_value=calculate_market_value(listings, params.query, rng),
    )
