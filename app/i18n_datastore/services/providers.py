"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the message engine.
"""

from functools import lru_cache

from i18n_datastore.configuration import Settings
from i18n_datastore.messages import I18nService, create_i18n_service


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_i18n_service() -> I18nService:
    """
    Get application-scoped message service singleton.

    The service's cache lives as long as the process. Hosts serving
    unrelated requests should use ``request_scope()`` on it.

    Returns:
        I18nService: Cached service configured from application settings.
    """
    return create_i18n_service(get_settings().i18n)
