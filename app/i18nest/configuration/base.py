"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LibrarySettings(BaseSettings):
    """Base class for library-level settings.

    All settings classes should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    Fields may be passed by name or set from their upper-case env alias.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )
