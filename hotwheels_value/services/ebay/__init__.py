"""eBay Finding API integration services"""

from .url_builder import FindingURLBuilder
from .response_parser import PaginationInfo, parse_completed_items, parse_pagination
from .ebay_client import EbayFindingClient, search_hot_wheels

__all__ = [
    "FindingURLBuilder",
    "PaginationInfo",
    "parse_completed_items",
    "parse_pagination",
    "EbayFindingClient",
    "search_hot_wheels",
]
