"""Wishlist use cases."""

from __future__ import annotations

from koma_api.domain.collections import add_wishlist_item, remove_wishlist_item
from koma_api.domain.users import UserDocument
from koma_api.services.document_service import UserDocumentService


class WishlistService(UserDocumentService):
    def list_items(self, user_id: str) -> list:
        return list(self._load(user_id).wishlist or [])

    def add(self, user_id: str, *, product_id: str, name=None, image=None, price=None) -> list:
        def _apply(user: UserDocument) -> list:
            user.wishlist = add_wishlist_item(user.wishlist, product_id=product_id, name=name, image=image, price=price)
            return user.wishlist

        return self._mutate(user_id, _apply)

    def remove(self, user_id: str, product_id: str) -> list:
        def _apply(user: UserDocument) -> list:
            user.wishlist = remove_wishlist_item(user.wishlist, product_id)
            return user.wishlist

        return self._mutate(user_id, _apply)
