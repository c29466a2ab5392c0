from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from koma_api.schemas import CartLineCreate, CartQuantityUpdate
from koma_api.services.cart_service import CartService

router = APIRouter(prefix="/users", tags=["cart"])


def _get_cart_service(request: Request) -> CartService:
    svc = getattr(getattr(request.app, "state", None), "cart_service", None)
    if not svc:
        raise RuntimeError("CartService not configured")
    return svc


@router.get("/{user_id}/cart")
def list_cart(user_id: str, request: Request):
    return {"cart": _get_cart_service(request).list_lines(user_id)}


@router.post("/{user_id}/cart", status_code=201)
def add_to_cart(user_id: str, payload: CartLineCreate, request: Request):
    lines = _get_cart_service(request).add_or_increment(
        user_id,
        cart_id=payload.cartId,
        product_id=payload.productId,
        name=payload.name,
        image=payload.image,
        price=payload.price,
        quantity=payload.quantity,
    )
    return {"message": "Cart updated", "cart": lines}


@router.put("/{user_id}/cart/{cart_id}")
def update_cart_line(
    user_id: str,
    cart_id: str,
    request: Request,
    payload: Optional[CartQuantityUpdate] = Body(None),
):
    quantity = payload.quantity if payload else None
    lines = _get_cart_service(request).set_quantity(user_id, cart_id, quantity)
    return {"message": "Cart item updated", "cart": lines}


@router.delete("/{user_id}/cart/{cart_id}")
def remove_from_cart(user_id: str, cart_id: str, request: Request):
    lines = _get_cart_service(request).remove(user_id, cart_id)
    return {"message": "Removed from cart", "cart": lines}
