"""
Normalization of eBay Finding API responses.

The Finding API's JSON dialect wraps every value, scalar or not, in a
one-element array, so ``item["title"]`` is ``["Twin Mill"]``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...error_handling import EbayResponseError
from ...models import Listing


logger = logging.getLogger(__name__)

RESPONSE_KEY = "findCompletedItemsResponse"


@dataclass
class PaginationInfo:
    """Pagination block of a completed-items response."""
    current_page: int
    total_pages: int
    total_entries: int


def _first(container: Dict[str, Any], key: str) -> Optional[Any]:
    """First element of an array-wrapped field, or None when absent."""
    values = container.get(key)
    if not values:
        return None
    return values[0]


def _amount(block: Dict[str, Any]) -> float:
    """Decimal value of a currency-tagged amount ``{"@currencyId", "__value__"}``."""
    return float(block["__value__"])


def parse_item(item: Dict[str, Any]) -> Listing:
    """Parse one ``searchResult.item`` entry into a Listing.

    Raises:
        KeyError, IndexError, TypeError, ValueError, AttributeError: when a
            required field is missing or malformed, or a block is not an object
    """
    condition_block = _first(item, "condition") or {}
    condition = _first(condition_block, "conditionDisplayName") or "Unknown"

    price = _amount(item["sellingStatus"][0]["convertedCurrentPrice"][0])

    shipping = None
    shipping_info = _first(item, "shippingInfo")
    if shipping_info and shipping_info.get("shippingServiceCost"):
        shipping = _amount(shipping_info["shippingServiceCost"][0])

    return Listing(
        id=item["itemId"][0],
        title=item["title"][0],
        condition=condition,
        price=price,
        shipping=shipping,
        image_url=_first(item, "galleryURL") or None,
        listing_url=item["viewItemURL"][0],
        sold_date=item["listingInfo"][0]["endTime"][0],
    )


def parse_completed_items(data: Dict[str, Any]) -> List[Listing]:
    """Parse a completed-items response into listings.

    A response reporting zero results yields an empty list without reading
    the item array. Any malformed item discards the whole page: the failure
    is logged and an empty list returned.
    """
    try:
        search_result = data[RESPONSE_KEY][0]["searchResult"][0]
        count = search_result.get("@count")
        if count is not None and int(count) == 0:
            return []

        return [parse_item(item) for item in search_result["item"]]
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        # pydantic's ValidationError is a ValueError
        logger.error(f"Error parsing eBay response: {e!r}")
        return []


def parse_pagination(data: Dict[str, Any]) -> PaginationInfo:
    """Read the pagination block of a completed-items response.

    Raises:
        EbayResponseError: if the block is missing or malformed
    """
    try:
        pagination = data[RESPONSE_KEY][0]["paginationOutput"][0]
        return PaginationInfo(
            current_page=int(pagination["pageNumber"][0]),
            total_pages=int(pagination["totalPages"][0]),
            total_entries=int(pagination["totalEntries"][0]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise EbayResponseError(f"Unexpected eBay response: missing pagination output ({e!r})") from e
