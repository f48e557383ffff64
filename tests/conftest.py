"""Test configuration and fixtures for casewright."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from casewright import CaseStyle
from casewright.config import LOG_LEVEL_ENV, STYLE_ENV


@pytest.fixture(params=list(CaseStyle), ids=lambda s: s.value)
def style(request):
    """Every case style, one test run per style."""
    return request.param


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings tests independent of the developer's environment."""
    for name in (STYLE_ENV, LOG_LEVEL_ENV):
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield


@pytest.fixture(scope="function")
async def engine():
    """In-memory SQLite engine for each test function."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", future=True)
    yield engine
    await engine.dispose()
