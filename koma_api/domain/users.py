"""User document: profile fields plus the embedded wishlist/orders/cart."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from koma_api.core.errors import BadRequestError

# public (camelCase) name -> attribute on UserDocument
PROFILE_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "gender": "gender",
    "dob": "dob",
    "address": "address",
    "contact": "contact",
    "email": "email",
    "username": "username",
}
UPDATABLE_FIELDS = frozenset(PROFILE_FIELDS) | {"password"}


@dataclass
class UserDocument:
    username: str
    password_hash: str
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    address: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    wishlist: list = field(default_factory=list)
    orders: list = field(default_factory=list)
    cart: list = field(default_factory=list)
    version: int = 1

    def public_dict(self) -> dict:
        """Everything a caller may see; the password hash is never included."""
        data: dict[str, Any] = {"id": self.id}
        for key, attr in PROFILE_FIELDS.items():
            data[key] = getattr(self, attr)
        data["wishlist"] = list(self.wishlist)
        data["orders"] = list(self.orders)
        data["cart"] = list(self.cart)
        return data


def text_value(key: str, value: Any) -> Optional[str]:
    """
    Coerce a submitted scalar to text, as stored. Strings are kept verbatim,
    numbers and booleans become their string form; nested structures are rejected.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise BadRequestError(f"Invalid value for {key}")


def profile_value(key: str, value: Any) -> Optional[str]:
    """Profile field as stored; username may never be emptied."""
    text = text_value(key, value)
    if key == "username" and not text:
        raise BadRequestError("username must not be empty")
    return text
