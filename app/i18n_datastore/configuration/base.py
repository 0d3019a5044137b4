"""Shared base classes for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class ComponentSettings(BaseSettings):
    """Base class for component-level settings.

    All component settings should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
