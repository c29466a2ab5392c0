from __future__ import annotations

from fastapi import APIRouter, Request

from koma_api.schemas import OrderCreate
from koma_api.services.order_service import OrderService

router = APIRouter(prefix="/users", tags=["orders"])


def _get_order_service(request: Request) -> OrderService:
    svc = getattr(getattr(request.app, "state", None), "order_service", None)
    if not svc:
        raise RuntimeError("OrderService not configured")
    return svc


@router.get("/{user_id}/orders")
def list_orders(user_id: str, request: Request):
    return {"orders": _get_order_service(request).list_orders(user_id)}


@router.post("/{user_id}/orders", status_code=201)
def add_order(user_id: str, payload: OrderCreate, request: Request):
    orders = _get_order_service(request).add(
        user_id,
        order_id=payload.orderId,
        item=payload.item,
        status=payload.status,
        meta=payload.meta,
    )
    return {"message": "Order added", "orders": orders}
