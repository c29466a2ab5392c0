from __future__ import annotations

from fastapi import APIRouter, Request

from koma_api.schemas import LoginRequest, SignupRequest
from koma_api.services.account_service import AccountService

router = APIRouter(tags=["auth"])


def _get_account_service(request: Request) -> AccountService:
    svc = getattr(getattr(request.app, "state", None), "account_service", None)
    if not svc:
        raise RuntimeError("AccountService not configured")
    return svc


@router.post("/signup", status_code=201)
def signup(payload: SignupRequest, request: Request):
    svc = _get_account_service(request)
    user = svc.signup(
        username=payload.username,
        password=payload.password,
        first_name=payload.firstName,
        last_name=payload.lastName,
        gender=payload.gender,
        dob=payload.dob,
        address=payload.address,
        contact=payload.contact,
        email=payload.email,
    )
    return {"message": "User created successfully", "id": user.id}


@router.post("/login")
def login(payload: LoginRequest, request: Request):
    user = _get_account_service(request).login(payload.username, payload.password)
    return {"message": "Login successful", "user": user}
