"""Tests for the health check and root endpoints."""

from unittest.mock import AsyncMock

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cinestats.database import get_movie_store
from cinestats.main import app


async def test_health_returns_ok(test_app: FastAPI, store: AsyncMock) -> None:
    test_app.dependency_overrides[get_movie_store] = lambda: store
    try:
        async with AsyncClient(
            transport=ASGITransport(app=test_app), base_url="http://test"
        ) as client:
            response = await client.get("/health")
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_health_reports_unavailable_database(test_app: FastAPI, store: AsyncMock) -> None:
    store.ping.return_value = False
    test_app.dependency_overrides[get_movie_store] = lambda: store
    try:
        async with AsyncClient(
            transport=ASGITransport(app=test_app), base_url="http://test"
        ) as client:
            response = await client.get("/health")
    finally:
        test_app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "unavailable"}


async def test_root_returns_plain_text() -> None:
    # ASGITransport does not run the lifespan, so no Mongo client is created
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "running" in response.text
