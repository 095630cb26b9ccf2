"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI

from cinestats.api.errors import add_exception_handlers
from cinestats.api.routes import health, movies
from cinestats.database import MovieStore


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the Mongo lifespan, for API tests."""
    app = FastAPI()
    add_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    return app


@pytest.fixture
def store() -> AsyncMock:
    """Movie store double; set return values or side effects per test."""
    store = AsyncMock(spec=MovieStore)
    store.find.return_value = []
    store.aggregate.return_value = []
    store.ping.return_value = True
    return store
