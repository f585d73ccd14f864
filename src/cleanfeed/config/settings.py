"""Configuration management using pydantic-settings.

Supports environment variables and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "cleanfeed"
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs

    # Feed
    feed_url: str = Field(
        default="https://a-given-url.com",
        description="Endpoint serving the feed document",
    )

    # HTTP
    http_timeout: int = Field(default=30, ge=1, description="Request timeout in seconds")
    http_user_agent: str = "CleanFeed/1.0"
    http_follow_redirects: bool = True


# Global singleton instance
settings = Settings()
