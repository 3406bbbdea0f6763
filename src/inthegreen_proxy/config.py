"""Application configuration via pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Notion OAuth integration
    notion_client_id: str = ""
    notion_client_secret: str = ""

    # Explicit application origin; empty means derive it from the request
    frontend_url: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8787


def get_settings() -> Settings:
    """Load settings fresh for the current request.

    Used as a FastAPI dependency so nothing configuration-derived outlives a
    request. Tests replace it through ``app.dependency_overrides``.
    """
    return Settings()
