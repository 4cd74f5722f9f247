# src/bifrost/settings.py
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bifrost.config import BridgeConfig


class BridgeSettings(BaseSettings):
    """
    Environment backed bridge settings for applications embedding bifrost.

    Configuration precedence:
    1. Environment variables prefixed with BIFROST_ (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    Usage:
        from bifrost.settings import get_settings
        bridge = new_rainbow_bridge(get_settings().to_bridge_config())
    """
    model_config = SettingsConfigDict(
        env_prefix="BIFROST_",
        env_file=".env",
        extra="ignore",
    )

    provider: str = Field(default="s3", description="Provider identifier")
    default_bucket: str = ""
    region: str = Field(default="us-east-1", description="Provider region")
    access_key: str = ""
    secret_key: str = ""
    credentials_file: str = ""
    project: str = ""
    default_timeout: int = Field(default=0, description="Per-call timeout in seconds")
    enable_debug: bool = False
    public_read: bool = False
    use_async: bool = False
    pinata_jwt: str = ""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names."""
        return v.upper()

    def to_bridge_config(self) -> BridgeConfig:
        """Build the immutable BridgeConfig consumed by new_rainbow_bridge."""
        return BridgeConfig(**self.model_dump(exclude={"log_level"}))


@lru_cache()
def get_settings() -> BridgeSettings:
    """Get cached settings instance."""
    return BridgeSettings()
