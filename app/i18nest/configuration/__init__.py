"""Configuration module - public API.

Provides settings management for the translation pipeline using Pydantic
BaseSettings.

Exports:
    I18nSettings: Settings class (for testing/overrides)
    get_settings: Process-wide settings singleton

Example:
    ```python
    from i18nest.configuration import get_settings

    settings = get_settings()
    settings.debug = True
    ```
"""

from functools import lru_cache

from i18nest.configuration.settings import I18nSettings


@lru_cache
def get_settings() -> I18nSettings:
    """Get the process-wide settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        I18nSettings: Cached settings instance loaded from environment.
    """
    return I18nSettings()


__all__ = ["I18nSettings", "get_settings"]
