#!/usr/bin/env python3
"""
Register an account directly against the configured store.

Usage:
  python scripts/create_user.py --username alice [--password s3cret] [--email alice@example.com]
"""
from __future__ import annotations

import argparse
import secrets

from koma_api.core.errors import AccountError
from koma_api.core.logs import configure_logging
from koma_api.db.create_tables import create_all
from koma_api.repositories.user_repository import SQLUserRepository
from koma_api.services.account_service import AccountService


def gen_password(length: int = 12) -> str:
    return secrets.token_urlsafe(length)[:length]


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a user account")
    ap.add_argument("--username", required=True, help="Unique login name")
    ap.add_argument("--password", help="Password (default: random 12 chars, printed once)")
    ap.add_argument("--first-name")
    ap.add_argument("--last-name")
    ap.add_argument("--email")
    ap.add_argument("--contact")
    args = ap.parse_args()

    configure_logging()
    username = (args.username or "").strip()
    if not username:
        raise SystemExit("Invalid username")
    password = args.password or gen_password()

    create_all()
    svc = AccountService(SQLUserRepository())
    try:
        user = svc.signup(
            username=username,
            password=password,
            first_name=args.first_name,
            last_name=args.last_name,
            email=args.email,
            contact=args.contact,
        )
    except AccountError as exc:
        raise SystemExit(exc.message) from exc

    print("OK: user registered")
    print(f"  ID: {user.id}")
    print(f"  Username: {username}")
    if not args.password:
        print(f"  Password: {password}")


if __name__ == "__main__":
    main()
