"""
Configuration Settings.

This module defines the Status Service configuration using Pydantic's BaseSettings.
It loads everything from environment variables and an optional .env file once,
at process start. The resulting ``Settings`` object is handed to the app factory
and reaches request handlers through a dependency; handlers never read the
environment themselves.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class CORSConfig(BaseModel):
    """CORS configuration."""

    origin: str = Field(alias="CORS_ORIGIN", description="Allowed CORS origins, comma separated (* for all)")
    allow_credentials: bool = Field(alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests")

    model_config = {"populate_by_name": True}

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.origin.split(",") if o.strip()] or ["*"]


class RateLimitConfig(BaseModel):
    """Rate limiting applied to the /api/ routes."""

    enabled: bool = Field(alias="RATE_LIMIT_ENABLED", description="Enable /api/ rate limiting")
    max_requests: int = Field(alias="RATE_LIMIT_MAX", description="Requests allowed per client within one window")
    window_seconds: float = Field(alias="RATE_LIMIT_WINDOW_SECONDS", description="Length of one rate limit window")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Status Service settings model.

    All properties are bound from environment variables and the .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    host: str = Field(default="0.0.0.0", description="Address the Status Service binds to", alias="HOST")
    port: int = Field(default=10000, description="Status Service port number", alias="PORT")
    environment: str = Field(
        default="development",
        description="Environment name reported by the health endpoint",
        alias="NODE_ENV",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SEYALI_LOG_LEVEL",
    )
    frontend_url: Optional[str] = Field(
        default=None, description="Public URL of the Status Page", alias="FRONTEND_URL"
    )

    # =====================================================================
    # Backing Services (presence-checked only)
    # =====================================================================
    database_url: Optional[str] = Field(
        default=None, description="Database connection string", alias="DATABASE_URL"
    )
    redis_url: Optional[str] = Field(default=None, description="Cache connection string", alias="REDIS_URL")

    # =====================================================================
    # HTTP Middleware Configuration (read through ``cors`` and ``rate_limit``)
    # =====================================================================
    cors_origin: str = Field(default="*", description="Allowed CORS origins, comma separated", alias="CORS_ORIGIN")
    cors_allow_credentials: bool = Field(
        default=True, description="Allow credentials in CORS requests", alias="CORS_ALLOW_CREDENTIALS"
    )
    rate_limit_enabled: bool = Field(default=True, description="Enable /api/ rate limiting", alias="RATE_LIMIT_ENABLED")
    rate_limit_max: int = Field(
        default=100, ge=1, description="Requests allowed per client within one window", alias="RATE_LIMIT_MAX"
    )
    rate_limit_window_seconds: float = Field(
        default=15 * 60, gt=0, description="Length of one rate limit window in seconds", alias="RATE_LIMIT_WINDOW_SECONDS"
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def redis_configured(self) -> bool:
        return bool(self.redis_url)

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def rate_limit(self) -> RateLimitConfig:
        """Get rate limit configuration."""
        return RateLimitConfig.model_validate(self.model_dump(by_alias=True))
