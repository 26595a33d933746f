"""
Configuration settings for the accounts client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.form3.tech"


class AccountsClientSettings(BaseSettings):
    """
    Configuration for the accounts API client.

    Settings are loaded from environment variables with ACCOUNTS_API_ prefix.
    Example: ACCOUNTS_API_BASE_URL, ACCOUNTS_API_TIMEOUT.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTS_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the accounts API"
    )

    # HTTP client settings
    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )


# Programmatically configured instance, takes precedence over the environment
_settings: Optional[AccountsClientSettings] = None


@lru_cache
def _load_settings() -> AccountsClientSettings:
    return AccountsClientSettings()


def get_settings() -> AccountsClientSettings:
    """
    Get the accounts client settings.

    Returns the instance installed by configure_settings() if any,
    otherwise settings loaded once from the environment.
    """
    if _settings is not None:
        return _settings
    return _load_settings()


def configure_settings(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    **kwargs,
) -> AccountsClientSettings:
    """
    Configure settings programmatically.

    This allows overriding environment variables for testing
    or when settings come from a different source.

    Args:
        base_url: Base URL of the accounts API
        timeout: HTTP request timeout in seconds
        **kwargs: Additional settings

    Returns:
        Configured AccountsClientSettings instance
    """
    global _settings

    # Build settings dict, filtering None values
    settings_dict = {
        k: v for k, v in {
            "base_url": base_url,
            "timeout": timeout,
            **kwargs,
        }.items() if v is not None
    }

    _settings = AccountsClientSettings(**settings_dict)
    return _settings


def reset_settings() -> None:
    """Drop programmatic settings and the cached environment settings."""
    global _settings
    _settings = None
    _load_settings.cache_clear()
