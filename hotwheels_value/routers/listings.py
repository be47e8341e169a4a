"""
Listing search routes.
"""

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..error_handling import (
    HotWheelsValueError,
    ListingsSearchError,
    SearchValidationError,
    format_validation_errors,
)
from ..models import ListingsResponse, SearchParams
from ..services.ebay import search_hot_wheels
from ..services.mock import generate_mock_data

logger = logging.getLogger(__name__)

router = APIRouter()


def get_search_params(
    query: Optional[str] = Query(None, description="Search keywords"),
    condition: Optional[str] = Query(None, description="all, new, used, unopened or mint"),
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    sort: Optional[str] = Query(None, description="best-match, price-low, price-high, date-new or date-old"),
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
) -> SearchParams:
    """Dependency to extract and validate search parameters.

    Parameters arrive as raw strings so every problem, including a
    non-numeric price, is reported through the same validation message.
    Empty values count as absent.
    """
    raw = {
        "query": query,
        "condition": condition or None,
        "minPrice": min_price or None,
        "maxPrice": max_price or None,
        "sort": sort or None,
    }
    if page:
        raw["page"] = page

    try:
        return SearchParams.model_validate(raw)
    except ValidationError as e:
        raise SearchValidationError(format_validation_errors(e.errors())) from e


@router.get(
    "/listings",
    response_model=ListingsResponse,
    response_model_exclude_none=True,
)
async def search_listings(
    params: SearchParams = Depends(get_search_params),
    settings: Settings = Depends(get_settings),
):
    """
    Search completed Hot Wheels sales and summarize their market value.

    Uses the eBay Finding API when EBAY_API_KEY is set, mock data otherwise.
    """
    try:
        if settings.use_mock_data:
            logger.warning(
                "No eBay API key found. Using mock data instead. "
                "Set EBAY_API_KEY environment variable for real data."
            )
            rng = random.Random(settings.mock.seed) if settings.mock.seed is not None else None
            return generate_mock_data(
                params,
                rng=rng,
                total_listings=settings.mock.total_listings,
                page_size=settings.mock.page_size,
            )

        return await search_hot_wheels(params, settings)

    except HotWheelsValueError as e:
        logger.error(f"Error searching listings: {e}")
        raise
    except Exception as e:
        logger.error(f"Error searching listings: {e}", exc_info=True)
        raise ListingsSearchError(
            str(e) or "An unknown error occurred while searching for Hot Wheels listings"
        ) from e
