"""Application-scoped service providers."""

from i18n_datastore.services.providers import get_i18n_service, get_settings

__all__ = ["get_i18n_service", "get_settings"]
