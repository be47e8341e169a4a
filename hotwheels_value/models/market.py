"""Market value data models"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .listing import Listing


class MarketValue(BaseModel):
    """Summary statistics over one result set.

    Every numeric field defaults to zero, which is also the summary of an
    empty result set.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        protected_namespaces=(),
    )

    average_price: float = Field(0.0, alias="averagePrice")
    median_price: float = Field(0.0, alias="medianPrice")
    min_price: float = Field(0.0, alias="minPrice")
    max_price: float = Field(0.0, alias="maxPrice")
    recommended_value: float = Field(0.0, alias="recommendedValue")
    total_listings: int = Field(0, alias="totalListings")
    price_change: Optional[float] = Field(None, alias="priceChange")
    model: str


class ListingsResponse(BaseModel):
    """Search results with pagination and market value"""
    model_config = ConfigDict(populate_by_name=True)

    listings: List[Listing]
    total_listings: int = Field(..., alias="totalListings")
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    market_value: MarketValue = Field(..., alias="marketValue")
