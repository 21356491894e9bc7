"""
Configuration settings for placeholder API test runs.
"""

from functools import lru_cache
from typing import Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlaceholderSettings(BaseSettings):
    """
    Connection settings for the placeholder REST service.

    Settings are loaded from environment variables with PLACEHOLDER_ prefix.
    Example: PLACEHOLDER_BASE_URL, PLACEHOLDER_TIMEOUT, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLACEHOLDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="Base URL of the placeholder service"
    )

    # HTTP client settings
    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether redirects are followed"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra headers sent with every request (JSON in the environment)"
    )


_settings: Optional[PlaceholderSettings] = None


@lru_cache
def _load_settings() -> PlaceholderSettings:
    return PlaceholderSettings()


def get_settings() -> PlaceholderSettings:
    """
    Get the active settings.

    Programmatic settings from ``configure_settings`` win over the
    environment, which is only read once.

    Raises:
        ValidationError: If an environment value cannot be parsed
    """
    if _settings is not None:
        return _settings
    return _load_settings()


def configure_settings(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    **kwargs,
) -> PlaceholderSettings:
    """
    Configure settings programmatically.

    This allows overriding environment variables for testing
    or when settings come from a different source.

    Args:
        base_url: Placeholder service URL
        timeout: Request timeout in seconds
        **kwargs: Additional settings

    Returns:
        Configured PlaceholderSettings instance
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

    _settings = PlaceholderSettings(**settings_dict)
    return _settings


def reset_settings() -> None:
    """Forget programmatic settings and re-read the environment on next access."""
    global _settings
    _settings = None
    _load_settings.cache_clear()
