"""
Status Page Configuration.

Loaded once when the page process starts and passed to the page app.
"""

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:10000"


class PageSettings(BaseSettings):
    """Status Page settings bound from environment variables and the .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    api_url: AnyHttpUrl = Field(
        default=DEFAULT_API_URL,
        validate_default=True,
        description="Public base URL of the Status Service",
        alias="SEYALI_API_URL",
    )
    api_timeout: float = Field(
        default=10.0, gt=0, description="Timeout in seconds for Status Service calls", alias="SEYALI_API_TIMEOUT"
    )
    host: str = Field(default="0.0.0.0", description="Address the page binds to", alias="PAGE_HOST")
    port: int = Field(default=3000, description="Status Page port number", alias="PAGE_PORT")
    log_level: str = Field(default="INFO", alias="SEYALI_LOG_LEVEL")

    @field_validator("api_url", mode="before")
    @classmethod
    def _blank_means_default(cls, value):
        if isinstance(value, str) and not value.strip():
            return DEFAULT_API_URL
        return value

    @property
    def base_url(self) -> str:
        return str(self.api_url).rstrip("/")
