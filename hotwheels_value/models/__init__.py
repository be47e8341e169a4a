"""Data models for the Hot Wheels market value service."""

from .search import Condition, SortMode, SearchParams
from .listing import Listing
from .market import MarketValue, ListingsResponse

__all__ = [
    "Condition",
    "SortMode",
    "SearchParams",
    "Listing",
    "MarketValue",
    "ListingsResponse",
]
