"""
Request payloads for the account API.

Models are deliberately permissive: profile fields are stored as given and
only the fields the use cases depend on are required.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    firstName: Any = Field(None, description="First name")
    lastName: Any = Field(None, description="Last name")
    gender: Any = Field(None, description="Gender, free text")
    dob: Any = Field(None, description="Date of birth, free text")
    address: Any = Field(None, description="Postal address")
    contact: Any = Field(None, description="Phone or other contact")
    email: Any = Field(None, description="Email address")
    username: str = Field(..., min_length=1, description="Unique, case-sensitive login name")
    password: str = Field(..., description="Plaintext password, hashed before storage")


class LoginRequest(BaseModel):
    username: str
    password: str


class WishlistItemCreate(BaseModel):
    productId: str = Field(..., description="Catalog product reference")
    name: Any = None
    image: Any = Field(None, description="Image URL")
    price: Optional[float] = Field(None, ge=0, description="Price")


class OrderCreate(BaseModel):
    orderId: Optional[str] = Field(None, description="Caller supplied id; generated when absent")
    item: Any = Field(None, description="Order description")
    status: Any = Field(None, description="Free-form status, defaults to Processing")
    meta: Any = Field(None, description="Opaque payload stored as given")


class CartLineCreate(BaseModel):
    cartId: Optional[str] = None
    productId: Optional[str] = None
    name: Any = None
    image: Any = None
    price: Optional[float] = Field(None, ge=0)
    quantity: Any = Field(None, description="Increment; non-numeric or missing counts as 1")


class CartQuantityUpdate(BaseModel):
    quantity: Any = None
