"""Unit tests for application settings."""

import pytest

from cinestats.config import Settings


def test_defaults() -> None:
    config = Settings(_env_file=None)

    assert config.mongo_uri == "mongodb://localhost:27017/movies"
    assert config.mongo_collection == "movies"
    assert config.port == 3000
    assert config.cors_origins == ["*"]


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGO_URI", "mongodb://db.example:27017/imdb")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings(_env_file=None)

    assert config.mongo_uri == "mongodb://db.example:27017/imdb"
    assert config.port == 8080
    assert config.log_level == "debug"
