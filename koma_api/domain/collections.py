"""
Mutation rules for the collections embedded in a user document.

Every function works on the in-memory list loaded with the user and returns
the resulting list; persisting it is the caller's job.
"""
from __future__ import annotations

import math
from typing import Any, Optional

from koma_api.core.errors import BadRequestError, ConflictError, NotFoundError
from koma_api.core.utils import generate_line_token, utc_now_iso
from koma_api.domain.users import text_value

DEFAULT_ORDER_STATUS = "Processing"


def as_number(value: Any) -> Optional[float]:
    """Numeric reading of a JSON value, or None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def quantity_or_default(value: Any) -> int:
    """Quantity used when adding to the cart: at least 1, falling back to 1."""
    number = as_number(value)
    if number is None or number < 1:
        return 1
    return int(number)


# -------------------------------------- wishlist --------------------------------------
def add_wishlist_item(items: list, *, product_id: str, name=None, image=None, price=None) -> list:
    if any(item.get("productId") == product_id for item in items):
        raise ConflictError("Item already in wishlist")
    items.append(
        {
            "productId": product_id,
            "name": text_value("name", name),
            "image": text_value("image", image),
            "price": price,
            "addedAt": utc_now_iso(),
        }
    )
    return items


def remove_wishlist_item(items: list, product_id: str) -> list:
    return [item for item in items if item.get("productId") != product_id]


# -------------------------------------- orders --------------------------------------
def append_order(orders: list, *, order_id=None, item=None, status=None, meta=None) -> list:
    orders.append(
        {
            "orderId": order_id or generate_line_token(),
            "item": text_value("item", item),
            "status": text_value("status", status) or DEFAULT_ORDER_STATUS,
            "date": utc_now_iso(),
            "meta": meta,
        }
    )
    return orders


# -------------------------------------- cart --------------------------------------
def _find_line(lines: list, key: str, value: Any) -> Optional[dict]:
    for line in lines:
        if line.get(key) == value:
            return line
    return None


def _new_cart_id(lines: list) -> str:
    taken = {line.get("cartId") for line in lines}
    token = generate_line_token()
    while token in taken:
        token = generate_line_token()
    return token


def merge_cart_line(
    lines: list,
    *,
    cart_id: Optional[str] = None,
    product_id: Optional[str] = None,
    name=None,
    image=None,
    price=None,
    quantity: Any = None,
) -> list:
    """
    Add to the cart, or bump an existing line. A line matches by productId
    first, then by cartId; otherwise a new line is created.
    """
    existing = None
    if product_id:
        existing = _find_line(lines, "productId", product_id)
    if existing is None and cart_id:
        existing = _find_line(lines, "cartId", cart_id)

    if existing is not None:
        current = as_number(existing.get("quantity")) or 1
        existing["quantity"] = int(current) + quantity_or_default(quantity)
        return lines

    lines.append(
        {
            "cartId": cart_id or _new_cart_id(lines),
            "productId": product_id,
            "name": text_value("name", name),
            "image": text_value("image", image),
            "price": price,
            "quantity": quantity_or_default(quantity),
            "addedAt": utc_now_iso(),
        }
    )
    return lines


def set_line_quantity(lines: list, cart_id: str, quantity: Any) -> list:
    """Overwrite a line's quantity as given; unlike merge_cart_line, no minimum applies."""
    line = _find_line(lines, "cartId", cart_id)
    if line is None:
        raise NotFoundError("Cart item not found")
    if quantity is not None:
        number = as_number(quantity)
        if number is None:
            raise BadRequestError("Quantity must be a number")
        line["quantity"] = int(number)
    return lines


def remove_cart_line(lines: list, cart_id: str) -> list:
    return [line for line in lines if line.get("cartId") != cart_id]
