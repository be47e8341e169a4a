"""
Tests for eBay completed-items response normalization.
"""

import logging

import pytest

from hotwheels_value.error_handling import EbayResponseError
from hotwheels_value.services.ebay import parse_completed_items, parse_pagination
from hotwheels_value.services.ebay.response_parser import PaginationInfo

from ebay_payloads import make_item, make_response


def test_parses_complete_item():
    listings = parse_completed_items(make_response([make_item()]))

    assert len(listings) == 1
    listing = listings[0]
    assert listing.id == "110000000001"
    assert listing.title == "Hot Wheels Twin Mill Red"
    assert listing.condition == "New"
    assert listing.price == 12.5
    assert listing.shipping == 4.25
    assert listing.image_url == "https://i.ebayimg.com/thumbs/images/g/abc/s-l140.jpg"
    assert listing.listing_url == "https://www.ebay.com/itm/110000000001"
    assert listing.sold_date == "2024-03-01T18:22:05.000Z"


def test_optional_fields_absent():
    """Missing condition, shipping and gallery fall back to defaults."""
    item = make_item(shipping=None, gallery_url=None, condition=None)

    listing = parse_completed_items(make_response([item]))[0]

    assert listing.condition == "Unknown"
    assert listing.shipping is None
    assert listing.image_url is None


def test_shipping_block_without_cost():
    item = make_item()
    item["shippingInfo"] = [{"shippingType": ["Calculated"]}]

    listing = parse_completed_items(make_response([item]))[0]

    assert listing.shipping is None


def test_condition_without_display_name():
    item = make_item()
    item["condition"] = [{"conditionId": ["3000"]}]

    listing = parse_completed_items(make_response([item]))[0]

    assert listing.condition == "Unknown"


def test_preserves_item_order():
    items = [make_item(item_id=str(n), price=str(n)) for n in (30, 10, 20)]

    listings = parse_completed_items(make_response(items))

    assert [listing.id for listing in listings] == ["30", "10", "20"]
    assert [listing.price for listing in listings] == [30.0, 10.0, 20.0]


def test_zero_count_returns_empty_without_reading_items():
    """A zero result count short-circuits before the (absent) item array."""
    payload = make_response([], count=0)

    assert "item" not in payload["findCompletedItemsResponse"][0]["searchResult"][0]
    assert parse_completed_items(payload) == []


def test_zero_count_ignores_garbage_items():
    payload = make_response([], count=0)
    payload["findCompletedItemsResponse"][0]["searchResult"][0]["item"] = "not a list"

    assert parse_completed_items(payload) == []


@pytest.mark.parametrize("field", ["itemId", "title", "sellingStatus", "viewItemURL", "listingInfo"])
def test_missing_required_field_discards_whole_page(field, caplog):
    """One malformed item empties the whole result and logs an error."""
    bad = make_item(item_id="2")
    del bad[field]
    payload = make_response([make_item(item_id="1"), bad, make_item(item_id="3")])

    with caplog.at_level(logging.ERROR):
        listings = parse_completed_items(payload)

    assert listings == []
    assert "Error parsing eBay response" in caplog.text


@pytest.mark.parametrize("price", ["abc", "-4.00", "NaN", ""])
def test_invalid_price_discards_whole_page(price):
    payload = make_response([make_item(), make_item(item_id="2", price=price)])

    assert parse_completed_items(payload) == []


def _condition_as_string():
    item = make_item(item_id="2")
    item["condition"] = ["New"]
    return make_response([make_item(item_id="1"), item])


def _shipping_info_as_string():
    item = make_item(item_id="2")
    item["shippingInfo"] = ["Free"]
    return make_response([make_item(item_id="1"), item])


@pytest.mark.parametrize("payload", [
    make_response(["not-an-item"]),
    make_response([make_item(), 42]),
    {"findCompletedItemsResponse": [{"searchResult": ["oops"]}]},
    _condition_as_string(),
    _shipping_info_as_string(),
])
def test_non_object_blocks_discard_whole_page(payload, caplog):
    """Blocks that should be objects but are not empty the result instead of raising."""
    with caplog.at_level(logging.ERROR):
        listings = parse_completed_items(payload)

    assert listings == []
    assert "Error parsing eBay response" in caplog.text


def test_nonzero_count_without_items():
    payload = make_response([], count=3)

    assert parse_completed_items(payload) == []


@pytest.mark.parametrize("payload", [
    {},
    {"findCompletedItemsResponse": []},
    {"findCompletedItemsResponse": [{}]},
    {"findCompletedItemsResponse": [{"searchResult": [{"@count": "x"}]}]},
    None,
])
def test_malformed_envelope_returns_empty(payload):
    assert parse_completed_items(payload) == []


def test_parse_pagination():
    payload = make_response([make_item()], page=2, total_pages=9, total_entries=101)

    assert parse_pagination(payload) == PaginationInfo(
        current_page=2, total_pages=9, total_entries=101
    )


@pytest.mark.parametrize("payload", [
    {},
    {"findCompletedItemsResponse": [{"searchResult": [{"@count": "0"}]}]},
    {"findCompletedItemsResponse": [{"paginationOutput": [{"pageNumber": ["one"]}]}]},
])
def test_parse_pagination_rejects_malformed_block(payload):
    with pytest.raises(EbayResponseError):
        parse_pagination(payload)
