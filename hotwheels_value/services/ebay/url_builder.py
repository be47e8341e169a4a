"""
URL construction for eBay Finding API completed-item searches.

This module maps a search request onto the Finding API's query-string
dialect: numbered ``itemFilter(n)`` clauses, named sort orders and
``paginationInput`` fields.
"""

from typing import List, Optional, Tuple, Union
from urllib.parse import urlencode, quote_plus

from ...config.settings import FINDING_API_URL, HOT_WHEELS_CATEGORY_ID
from ...models import Condition, SearchParams, SortMode


# eBay condition IDs
CONDITION_IDS = {
    Condition.NEW.value: "1000",       # New
    Condition.USED.value: "3000",      # Used
    Condition.UNOPENED.value: "1500",  # New other
    Condition.MINT.value: "1750",      # New with tags
}

SORT_ORDERS = {
    SortMode.PRICE_LOW.value: "PricePlusShippingLowest",
    SortMode.PRICE_HIGH.value: "PricePlusShippingHighest",
    SortMode.DATE_NEW.value: "EndTimeSoonest",
    SortMode.DATE_OLD.value: "EndTimeNewest",
}

DEFAULT_SORT_ORDER = "BestMatch"


def _enum_value(value: Union[str, Condition, SortMode, None]) -> Optional[str]:
    return getattr(value, "value", value)


def _format_price(value: float) -> str:
    """USD amount to the cent, without trailing zeros or exponent notation."""
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


class FindingURLBuilder:
    """Constructs ``findCompletedItems`` request URLs.

    Attributes:
        app_id: eBay App ID sent as SECURITY-APPNAME
        base_url: Finding API endpoint
        category_id: eBay category every search is restricted to
        entries_per_page: Fixed page size
    """

    OPERATION_NAME = "findCompletedItems"
    SERVICE_VERSION = "1.0.0"

    def __init__(
        self,
        app_id: str,
        base_url: str = FINDING_API_URL,
        category_id: str = HOT_WHEELS_CATEGORY_ID,
        entries_per_page: int = 12
    ):
        self.app_id = app_id
        self.base_url = base_url
        self.category_id = category_id
        self.entries_per_page = entries_per_page

    @staticmethod
    def condition_id(condition: Union[str, Condition, None]) -> Optional[str]:
        """eBay condition ID for ``condition``, or None when no filter applies."""
        return CONDITION_IDS.get(_enum_value(condition))

    @staticmethod
    def sort_order(sort: Union[str, SortMode, None]) -> str:
        """eBay sort order token, falling back to best match."""
        return SORT_ORDERS.get(_enum_value(sort), DEFAULT_SORT_ORDER)

    def build_item_filters(
        self,
        condition: Union[str, Condition, None] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None
    ) -> List[Tuple[str, str]]:
        """Build the numbered itemFilter parameters.

        Slot 0 is always the sold-items filter. Condition, min price and max
        price then take consecutive slots, each only when present.
        """
        clauses = [("SoldItemsOnly", "true", None)]

        condition_id = self.condition_id(condition)
        if condition_id:
            clauses.append(("Condition", condition_id, None))

        if min_price is not None:
            clauses.append(("MinPrice", _format_price(min_price), "USD"))

        if max_price is not None:
            clauses.append(("MaxPrice", _format_price(max_price), "USD"))

        params = []
        for index, (name, value, currency) in enumerate(clauses):
            params.append((f"itemFilter({index}).name", name))
            params.append((f"itemFilter({index}).value", value))
            if currency:
                params.append((f"itemFilter({index}).paramName", "Currency"))
                params.append((f"itemFilter({index}).paramValue", currency))
        return params

    def build_search_url(
        self,
        query: str,
        condition: Union[str, Condition, None] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        sort: Union[str, SortMode, None] = None,
        page: Optional[int] = None
    ) -> str:
        """Construct a completed-items search URL.

        Args:
            query: Search keywords (will be URL-encoded)
            condition: Condition filter; "all" or unknown values add no clause
            min_price: Minimum sold price in USD (optional)
            max_price: Maximum sold price in USD (optional)
            sort: Sort mode; unknown or absent values sort by best match
            page: Page number, defaults to 1

        Returns:
            Complete Finding API request URL

        Examples:
            >>> builder = FindingURLBuilder(app_id="MyApp-123")
            >>> builder.build_search_url("twin mill", condition="new")  # doctest: +ELLIPSIS
            'https://svcs.ebay.com/...&itemFilter(1).name=Condition&itemFilter(1).value=1000...'
        """
        service_params = [
            ("OPERATION-NAME", self.OPERATION_NAME),
            ("SERVICE-VERSION", self.SERVICE_VERSION),
            ("SECURITY-APPNAME", self.app_id),
            ("RESPONSE-DATA-FORMAT", "JSON"),
        ]

        search_params = [
            ("keywords", query),
            ("categoryId", self.category_id),
        ]
        search_params.extend(self.build_item_filters(condition, min_price, max_price))
        search_params.append(("sortOrder", self.sort_order(sort)))
        search_params.append(("paginationInput.entriesPerPage", str(self.entries_per_page)))
        search_params.append(("paginationInput.pageNumber", str(page or 1)))

        # REST-PAYLOAD is a bare flag; the filter names keep their parentheses
        return (
            f"{self.base_url}?{urlencode(service_params, quote_via=quote_plus)}"
            f"&REST-PAYLOAD"
            f"&{urlencode(search_params, quote_via=quote_plus, safe='()')}"
        )

    def build_from_params(self, params: SearchParams) -> str:
        """Build URL from a SearchParams object."""
        return self.build_search_url(
            query=params.query,
            condition=params.condition,
            min_price=params.min_price,
            max_price=params.max_price,
            sort=params.sort,
            page=params.page
        )
