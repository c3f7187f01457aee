"""Configuration settings for Catalog Viewer."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Catalog Viewer")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Remote catalog API
    api_base_url: str = Field(default="http://localhost:8080")
    request_timeout: Optional[float] = Field(default=None, gt=0)  # seconds

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # CLI
    page_size: int = Field(default=20, gt=0)


# Create global settings instance
settings = Settings()
