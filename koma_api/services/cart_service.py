"""Cart use cases: add-or-increment, direct quantity set, removal."""

from __future__ import annotations

from typing import Any, Optional

from koma_api.domain.collections import merge_cart_line, remove_cart_line, set_line_quantity
from koma_api.domain.users import UserDocument
from koma_api.services.document_service import UserDocumentService


class CartService(UserDocumentService):
    def list_lines(self, user_id: str) -> list:
        return list(self._load(user_id).cart or [])

    def add_or_increment(
        self,
        user_id: str,
        *,
        cart_id: Optional[str] = None,
        product_id: Optional[str] = None,
        name=None,
        image=None,
        price=None,
        quantity: Any = None,
    ) -> list:
        def _apply(user: UserDocument) -> list:
            user.cart = merge_cart_line(
                user.cart,
                cart_id=cart_id,
                product_id=product_id,
                name=name,
                image=image,
                price=price,
                quantity=quantity,
            )
            return user.cart

        return self._mutate(user_id, _apply)

    def set_quantity(self, user_id: str, cart_id: str, quantity: Any) -> list:
        def _apply(user: UserDocument) -> list:
            user.cart = set_line_quantity(user.cart, cart_id, quantity)
            return user.cart

        return self._mutate(user_id, _apply)

    def remove(self, user_id: str, cart_id: str) -> list:
        def _apply(user: UserDocument) -> list:
            user.cart = remove_cart_line(user.cart, cart_id)
            return user.cart

        return self._mutate(user_id, _apply)
