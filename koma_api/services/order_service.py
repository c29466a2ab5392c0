"""Order history use cases (append-only)."""

from __future__ import annotations

from typing import Any

from koma_api.domain.collections import append_order
from koma_api.domain.users import UserDocument
from koma_api.services.document_service import UserDocumentService


class OrderService(UserDocumentService):
    def list_orders(self, user_id: str) -> list:
        return list(self._load(user_id).orders or [])

    def add(self, user_id: str, *, order_id=None, item=None, status=None, meta: Any = None) -> list:
        def _apply(user: UserDocument) -> list:
            user.orders = append_order(user.orders, order_id=order_id, item=item, status=status, meta=meta)
            return user.orders

        return self._mutate(user_id, _apply)
