"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    unsplash_access_key: str = ""
    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_timeout_seconds: float = 30.0
    cors_origins: str = "http://localhost:3000"
    port: int = 8080
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def use_mock_vocabulary(self) -> bool:
        """Whether vocabulary comes from the offline datasets."""
        return not (self.openai_api_key and self.openai_api_key.strip())


def parse_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
