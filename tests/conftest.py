from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make koma_api importable when running the suite from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from koma_api.core import config as core_config  # noqa: E402
from koma_api.core import security  # noqa: E402
from koma_api.db import models  # noqa: E402
from koma_api.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    security._hasher.cache_clear()  # type: ignore[attr-defined]
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite store with cheap password hashing; caches reset around each test."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("PASSWORD_TIME_COST", "1")
    monkeypatch.setenv("PASSWORD_MEMORY_COST", "1024")
    monkeypatch.delenv("SAVE_MODE", raising=False)
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    engine.dispose()
    _clear_caches()


@pytest.fixture()
def cas_mode(monkeypatch):
    """Switch saves to compare-and-swap; combine with temp_db."""
    monkeypatch.setenv("SAVE_MODE", "compare_and_swap")
    monkeypatch.setenv("SAVE_MAX_RETRIES", "3")
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
