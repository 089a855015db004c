"""Startup/shutdown behaviour of the application lifespan."""

import logging

import pytest
from fastapi import FastAPI

from records_api.config import get_settings
from records_api.main import lifespan


@pytest.fixture
def database_url(monkeypatch):
    def _set(url: str) -> None:
        monkeypatch.setenv("DB_URL", url)
        get_settings.cache_clear()

    yield _set
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_lifespan_opens_and_closes_pool(database_url, tmp_path):
    database_url(f"sqlite:///{tmp_path / 'records.db'}")
    app = FastAPI()

    async with lifespan(app):
        assert app.state.database is not None

    assert (tmp_path / "records.db").exists()


@pytest.mark.asyncio
async def test_unreachable_database_is_fatal(database_url, tmp_path):
    database_url(f"sqlite:///{tmp_path / 'missing-dir' / 'records.db'}")
    app = FastAPI()

    with pytest.raises(Exception):
        async with lifespan(app):
            pass

    assert not hasattr(app.state, "database")


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["not-a-url", "mysql://u:p@localhost/records"])
async def test_malformed_database_url_is_logged_and_fatal(database_url, caplog, url):
    database_url(url)
    app = FastAPI()

    with caplog.at_level(logging.CRITICAL, logger="records_api.main"):
        with pytest.raises(Exception):
            async with lifespan(app):
                pass

    assert any(r.levelno == logging.CRITICAL for r in caplog.records)
    assert not hasattr(app.state, "database")
