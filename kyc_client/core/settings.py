"""Settings for the YouVerify KYC client.

Settings can be configured via environment variables or a local .env file.

Usage:
    from kyc_client.core.settings import get_settings

    settings = get_settings()
    print(settings.base_url)
    print(settings.timeout)
"""
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.youverify.co/v2/api/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0


class YouVerifySettings(BaseSettings):
    """YouVerify connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="YOUVERIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base address that operation paths are appended to"
    )
    token: SecretStr | None = Field(
        default=None,
        description="API token sent in the 'token' header of every request"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Read/write/pool timeout in seconds"
    )
    connect_timeout: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        gt=0,
        description="Connection timeout in seconds"
    )


@lru_cache
def get_settings() -> YouVerifySettings:
    """Get cached settings instance.

    Returns:
        YouVerifySettings: The settings loaded from the environment.
    """
    return YouVerifySettings()
