"""
Utility helpers shared across routers/services.
"""

from datetime import datetime, timezone
import secrets
import time


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_document_id() -> str:
    return secrets.token_hex(12)


def generate_line_token() -> str:
    """
    Time-based prefix plus a short random suffix, e.g. "1760870400123k3f9a1".
    Used for cart line ids and orders submitted without an id.
    """
    return f"{int(time.time() * 1000)}{secrets.token_hex(3)}"
