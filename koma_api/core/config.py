"""
Configuration helpers for the Koma account backend.

Routers/services never read os.environ directly; they receive a Settings
instance built once from the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

SAVE_MODE_LAST_WRITE_WINS = "last_write_wins"
SAVE_MODE_COMPARE_AND_SWAP = "compare_and_swap"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    store_timeout_seconds: int
    save_mode: str
    save_max_retries: int
    password_time_cost: int
    password_memory_cost: int
    cors_origins: tuple[str, ...]
    log_level: str
    host: str
    port: int

    @property
    def compare_and_swap(self) -> bool:
        return self.save_mode == SAVE_MODE_COMPARE_AND_SWAP


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _save_mode(value: str | None) -> str:
        mode = (value or "").strip().lower()
        if mode in {"cas", SAVE_MODE_COMPARE_AND_SWAP}:
            return SAVE_MODE_COMPARE_AND_SWAP
        return SAVE_MODE_LAST_WRITE_WINS

    origins = tuple(o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///./koma.db").strip(),
        store_timeout_seconds=max(1, _int(os.getenv("STORE_TIMEOUT_SECONDS"), 10)),
        save_mode=_save_mode(os.getenv("SAVE_MODE")),
        save_max_retries=max(1, _int(os.getenv("SAVE_MAX_RETRIES"), 3)),
        password_time_cost=max(1, _int(os.getenv("PASSWORD_TIME_COST"), 3)),
        # argon2 requires memory_cost >= 8 * parallelism (4 by default)
        password_memory_cost=max(32, _int(os.getenv("PASSWORD_MEMORY_COST"), 65536)),
        cors_origins=origins or ("*",),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), 5000),
    )
