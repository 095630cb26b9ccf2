"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017/movies"
    mongo_db_name: str = ""  # Empty means the URI's default database
    mongo_collection: str = "movies"
    mongo_timeout_ms: int = 5000

    # API settings
    api_host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
