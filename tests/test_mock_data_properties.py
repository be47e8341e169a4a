"""
Property-based tests for the mock data generator.
"""

import random
import re
from datetime import datetime, timedelta, timezone

from hypothesis import given, settings, strategies as st

from hotwheels_value.models import SearchParams
from hotwheels_value.services.mock import generate_mock_data, generate_mock_listing
from hotwheels_value.services.mock.mock_data import COLORS, CONDITIONS


pages = st.integers(min_value=1, max_value=20)
seeds = st.integers(min_value=0, max_value=2**32)
queries = st.text(
    alphabet=st.characters(whitelist_categories=('L', 'N'), max_codepoint=126),
    min_size=1,
    max_size=30
)


@given(page=pages, seed=seeds)
@settings(max_examples=100)
def test_page_slice_size(page, seed):
    """
    For any page, the generator returns exactly the slice of the 47-listing
    corpus that page covers, and an empty slice past the end.
    """
    result = generate_mock_data(SearchParams(query="Twin Mill", page=page), random.Random(seed))

    assert len(result.listings) == max(0, min(12, 47 - (page - 1) * 12))
    assert result.total_listings == 47
    assert result.total_pages == 4
    assert result.current_page == page
    assert result.market_value.total_listings == len(result.listings)


@given(query=queries, seed=seeds)
@settings(max_examples=100)
def test_listing_field_ranges(query, seed):
    """Every synthetic listing stays inside its documented ranges."""
    now = datetime.now(timezone.utc)
    result = generate_mock_data(SearchParams(query=query), random.Random(seed))

    for listing in result.listings:
        match = re.fullmatch(
            rf"Hot Wheels {re.escape(query)} (\w+) Edition (\d{{4}})", listing.title
        )
        assert match, f"Unexpected title: {listing.title}"
        assert match.group(1) in COLORS
        assert 1990 <= int(match.group(2)) <= 2022

        assert listing.condition in CONDITIONS
        assert 5 <= listing.price <= 35
        assert listing.shipping is None or 2 <= listing.shipping <= 8
        assert listing.image_url is None
        assert "LH_Sold=1" in listing.listing_url

        sold_at = datetime.fromisoformat(listing.sold_date.replace("Z", "+00:00"))
        assert now - timedelta(days=30) <= sold_at <= now + timedelta(seconds=5)


@given(seed=seeds)
@settings(max_examples=50)
def test_seeded_generator_is_deterministic(seed):
    params = SearchParams(query="Bone Shaker", page=2)

    first = generate_mock_data(params, random.Random(seed))
    second = generate_mock_data(params, random.Random(seed))

    def stable(listing):
        return (listing.id, listing.title, listing.condition, listing.price, listing.shipping)

    assert [stable(l) for l in first.listings] == [stable(l) for l in second.listings]
    assert first.market_value == second.market_value


def test_page_beyond_corpus_is_empty():
    result = generate_mock_data(SearchParams(query="Twin Mill", page=5))

    assert result.listings == []
    assert result.current_page == 5
    assert result.market_value.total_listings == 0
    assert result.market_value.average_price == 0
    assert result.market_value.model == "Twin Mill"


def test_last_page_is_partial():
    result = generate_mock_data(SearchParams(query="Twin Mill", page=4))

    assert len(result.listings) == 11


def test_listing_ids_unique_within_page():
    result = generate_mock_data(SearchParams(query="Deora"), random.Random(3))

    ids = [listing.id for listing in result.listings]
    assert len(ids) == len(set(ids)) == 12


def test_shipping_roughly_seventy_percent():
    rng = random.Random(12345)
    listings = [generate_mock_listing("Mustang", rng) for _ in range(2000)]

    with_shipping = sum(1 for listing in listings if listing.shipping is not None)
    assert 0.65 < with_shipping / len(listings) < 0.75


def test_custom_corpus_size():
    result = generate_mock_data(
        SearchParams(query="Deora", page=2), total_listings=30, page_size=20
    )

    assert len(result.listings) == 10
    assert result.total_pages == 2
