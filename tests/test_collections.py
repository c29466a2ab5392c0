"""
Pure mutation rules for wishlist, orders and cart lines.
"""
from __future__ import annotations

import pytest

from koma_api.core.errors import BadRequestError, ConflictError, NotFoundError
from koma_api.domain.collections import (
    add_wishlist_item,
    append_order,
    merge_cart_line,
    quantity_or_default,
    remove_cart_line,
    remove_wishlist_item,
    set_line_quantity,
)


def test_wishlist_rejects_duplicate_product():
    items = add_wishlist_item([], product_id="sku1", name="Mug", price=9.5)
    with pytest.raises(ConflictError):
        add_wishlist_item(items, product_id="sku1", name="Mug again")
    assert len(items) == 1
    assert items[0]["name"] == "Mug"
    assert items[0]["addedAt"]


def test_wishlist_remove_drops_all_matches_and_ignores_absent():
    items = [{"productId": "a"}, {"productId": "b"}, {"productId": "a"}]
    assert remove_wishlist_item(items, "a") == [{"productId": "b"}]
    assert remove_wishlist_item(items, "zzz") == items


def test_order_defaults_status_and_generates_id():
    orders = append_order([], item="2x Mug")
    orders = append_order(orders, order_id="o-1", item="Tea", status="", meta={"gift": True})
    orders = append_order(orders, order_id="o-1", item="Tea", status="Shipped")

    assert orders[0]["status"] == "Processing"
    assert orders[0]["orderId"]
    assert orders[1]["status"] == "Processing"
    assert orders[1]["meta"] == {"gift": True}
    assert [o["orderId"] for o in orders[1:]] == ["o-1", "o-1"]
    assert orders[2]["status"] == "Shipped"


@pytest.mark.parametrize("value, expected", [(None, 1), ("abc", 1), ("", 1), (0, 1), (-4, 1), (2, 2), ("3", 3), (2.7, 2), (float("nan"), 1), ([], 1)])
def test_quantity_or_default(value, expected):
    assert quantity_or_default(value) == expected


def test_merge_by_product_id_increments():
    lines = merge_cart_line([], product_id="p1", quantity=1)
    lines = merge_cart_line(lines, product_id="p1", quantity=2)
    assert len(lines) == 1
    assert lines[0]["quantity"] == 3


def test_merge_without_quantity_adds_one():
    lines = merge_cart_line([], product_id="p1")
    lines = merge_cart_line(lines, product_id="p1")
    assert lines[0]["quantity"] == 2


def test_merge_falls_back_to_cart_id():
    lines = merge_cart_line([], cart_id="c1", name="Scarf", quantity="2")
    lines = merge_cart_line(lines, cart_id="c1", product_id="unknown", quantity="x")
    assert len(lines) == 1
    assert lines[0]["quantity"] == 3


def test_product_id_match_wins_over_cart_id():
    lines = [
        {"cartId": "c1", "productId": "p1", "quantity": 1},
        {"cartId": "c2", "productId": "p2", "quantity": 1},
    ]
    merge_cart_line(lines, cart_id="c2", product_id="p1", quantity=5)
    assert lines[0]["quantity"] == 6
    assert lines[1]["quantity"] == 1


def test_new_lines_get_distinct_generated_ids():
    lines = merge_cart_line([], name="a")
    lines = merge_cart_line(lines, name="b")
    assert len(lines) == 2
    assert lines[0]["cartId"] and lines[1]["cartId"]
    assert lines[0]["cartId"] != lines[1]["cartId"]


def test_merge_treats_zero_quantity_line_as_one():
    lines = [{"cartId": "c1", "productId": "p1", "quantity": 0}]
    merge_cart_line(lines, product_id="p1", quantity=1)
    assert lines[0]["quantity"] == 2


def test_set_quantity_allows_zero_and_ignores_none():
    lines = [{"cartId": "c1", "quantity": 4}]
    set_line_quantity(lines, "c1", None)
    assert lines[0]["quantity"] == 4
    set_line_quantity(lines, "c1", 0)
    assert lines[0]["quantity"] == 0
    set_line_quantity(lines, "c1", "7")
    assert lines[0]["quantity"] == 7


def test_set_quantity_errors():
    lines = [{"cartId": "c1", "quantity": 1}]
    with pytest.raises(NotFoundError):
        set_line_quantity(lines, "missing", 2)
    with pytest.raises(BadRequestError):
        set_line_quantity(lines, "c1", "lots")


def test_remove_cart_line_is_noop_when_absent():
    lines = [{"cartId": "c1"}]
    assert remove_cart_line(lines, "c9") == lines
    assert remove_cart_line(lines, "c1") == []
