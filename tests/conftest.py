"""
Shared fixtures: a temporary SQLite database per test.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the solid_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solid_api.core import config as core_config  # noqa: E402
from solid_api.db.create_tables import create_all, drop_all  # noqa: E402
from solid_api.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "0")
    _clear_caches()

    engine = db_session.get_engine()
    drop_all()
    create_all()

    yield db_file

    try:
        drop_all()
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()
