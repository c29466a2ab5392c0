from __future__ import annotations

from fastapi import APIRouter, Request

from koma_api.schemas import WishlistItemCreate
from koma_api.services.wishlist_service import WishlistService

router = APIRouter(prefix="/users", tags=["wishlist"])


def _get_wishlist_service(request: Request) -> WishlistService:
    svc = getattr(getattr(request.app, "state", None), "wishlist_service", None)
    if not svc:
        raise RuntimeError("WishlistService not configured")
    return svc


@router.get("/{user_id}/wishlist")
def list_wishlist(user_id: str, request: Request):
    return {"wishlist": _get_wishlist_service(request).list_items(user_id)}


@router.post("/{user_id}/wishlist", status_code=201)
def add_to_wishlist(user_id: str, payload: WishlistItemCreate, request: Request):
    items = _get_wishlist_service(request).add(
        user_id,
        product_id=payload.productId,
        name=payload.name,
        image=payload.image,
        price=payload.price,
    )
    return {"message": "Added to wishlist", "wishlist": items}


@router.delete("/{user_id}/wishlist/{product_id}")
def remove_from_wishlist(user_id: str, product_id: str, request: Request):
    items = _get_wishlist_service(request).remove(user_id, product_id)
    return {"message": "Removed from wishlist", "wishlist": items}
