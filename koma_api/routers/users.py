from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request

from koma_api.services.account_service import AccountService

router = APIRouter(prefix="/users", tags=["users"])


def _get_account_service(request: Request) -> AccountService:
    svc = getattr(getattr(request.app, "state", None), "account_service", None)
    if not svc:
        raise RuntimeError("AccountService not configured")
    return svc


@router.put("/{user_id}")
def update_profile(user_id: str, request: Request, payload: Optional[dict] = Body(None)):
    user = _get_account_service(request).update_profile(user_id, payload)
    return {"message": "Profile updated", "user": user}
