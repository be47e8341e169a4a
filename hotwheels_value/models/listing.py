"""Listing data models"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Listing(BaseModel):
    """A single sold listing.

    Immutable once built; lives for one request/response cycle.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        allow_inf_nan=False,
        frozen=True,
    )

    id: str
    title: str
    condition: str = "Unknown"
    price: float = Field(..., ge=0)
    shipping: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, alias="imageUrl")
    listing_url: str = Field(..., alias="listingUrl")
    sold_date: str = Field(..., alias="soldDate")
