"""SQLAlchemy model for the user document and its embedded collections."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, JSON, func

from .session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(24), primary_key=True)
    username = Column(String(255), unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    first_name = Column(Text, nullable=True)
    last_name = Column(Text, nullable=True)
    gender = Column(Text, nullable=True)
    dob = Column(Text, nullable=True)
    address = Column(Text, nullable=True)
    contact = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    wishlist = Column(JSON, nullable=False, default=list)
    orders = Column(JSON, nullable=False, default=list)
    cart = Column(JSON, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
