"""Search data models"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Condition(str, Enum):
    """Item condition filter"""
    ALL = "all"
    NEW = "new"
    USED = "used"
    UNOPENED = "unopened"
    MINT = "mint"


class SortMode(str, Enum):
    """Result ordering"""
    BEST_MATCH = "best-match"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    DATE_NEW = "date-new"
    DATE_OLD = "date-old"


class SearchParams(BaseModel):
    """Search query parameters"""
    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
        frozen=True,
    )

    query: str = Field(..., min_length=1)
    condition: Optional[Condition] = None
    min_price: Optional[float] = Field(None, alias="minPrice", ge=0)
    max_price: Optional[float] = Field(None, alias="maxPrice", ge=0)
    sort: Optional[SortMode] = None
    page: int = Field(1, ge=1)

    @model_validator(mode="after")
    def check_price_range(self) -> "SearchParams":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("minPrice must be less than or equal to maxPrice")
        return self
