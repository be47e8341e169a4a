"""
eBay Finding API client - searches completed Hot Wheels sales and turns
them into listings plus a market value summary.
"""

import logging
from typing import Any, Dict, Optional

import aiohttp

from ...config import Settings, get_settings
from ...error_handling import EbayAPIError, EbayConfigError
from ...models import ListingsResponse, SearchParams
from ..market_value import calculate_market_value
from .response_parser import parse_completed_items, parse_pagination
from .url_builder import FindingURLBuilder


logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = (
    "eBay API key is not configured. Please set the EBAY_API_KEY environment variable."
)


class EbayFindingClient:
    """
    eBay Finding API client.

    One session per ``async with`` block; each search makes a single GET.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

        if not self.settings.ebay.api_key:
            raise EbayConfigError(MISSING_API_KEY_MESSAGE)

        self.url_builder = FindingURLBuilder(
            app_id=self.settings.ebay.api_key,
            base_url=self.settings.ebay.finding_url,
            category_id=self.settings.ebay.category_id,
            entries_per_page=self.settings.ebay.entries_per_page,
        )
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP session if one is open"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _ensure_session(self):
        """Ensure we have an open session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()

    async def fetch_completed_items(self, url: str) -> Dict[str, Any]:
        """
        GET a Finding API URL and decode its JSON body.

        Raises:
            EbayAPIError: if eBay answers with a non-success status
        """
        await self._ensure_session()

        async with self._session.get(url) as response:
            if not response.ok:
                raise EbayAPIError(response.status, response.reason)

            # The Finding API does not always label its JSON as such
            return await response.json(content_type=None)

    async def search_completed_items(self, params: SearchParams) -> ListingsResponse:
        """
        Search completed Hot Wheels sales.

        Args:
            params: Validated search parameters

        Returns:
            Listings for the requested page, eBay's pagination totals and the
            market value of the page's listings
        """
        logger.info(f"[EBAY SEARCH] Query: '{params.query}', Page: {params.page}")

        url = self.url_builder.build_from_params(params)
        data = await self.fetch_completed_items(url)

        listings = parse_completed_items(data)
        pagination = parse_pagination(data)
        market_value = calculate_market_value(listings, params.query)

        logger.info(
            f"[EBAY SEARCH] {len(listings)} listings on page {pagination.current_page}"
            f"/{pagination.total_pages} ({pagination.total_entries} total)"
        )

        return ListingsResponse(
            listings=listings,
            total_listings=pagination.total_entries,
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            market_value=market_value,
        )


async def search_hot_wheels(
    params: SearchParams,
    settings: Optional[Settings] = None
) -> ListingsResponse:
    """Search eBay for completed Hot Wheels sales.

    Raises:
        EbayConfigError: if no eBay API key is configured
        EbayAPIError: if eBay answers with a non-success status
        EbayResponseError: if the response envelope is unusable
    """
    async with EbayFindingClient(settings) as client:
        return await client.search_completed_items(params)
