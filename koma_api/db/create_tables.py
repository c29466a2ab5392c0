"""
Create the users table (profile columns plus embedded wishlist/orders/cart JSON).

Usage:
  python -m koma_api.db.create_tables

The app runs create_all() itself on startup; this entry point is for
provisioning a store ahead of the first deploy.
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all() -> None:
    engine = get_engine()
    Base.metadata.create_all(bind=engine)


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
