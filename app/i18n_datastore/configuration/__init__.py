"""Configuration module - public API.

Centralized configuration for the message engine using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Message engine settings class
"""

from i18n_datastore.configuration.i18n import I18nSettings
from i18n_datastore.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
