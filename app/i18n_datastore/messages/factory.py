"""Factory functions for creating message engine components.

Builds a fully wired service from settings, using the bundled language
name registry and fallback lists unless the settings point elsewhere.
"""

from typing import Optional

from i18n_datastore.configuration import I18nSettings
from i18n_datastore.logging import get_module_logger
from i18n_datastore.messages.fallbacks import StaticFallbackProvider
from i18n_datastore.messages.loader import JSONMessageSource, MessageCache
from i18n_datastore.messages.registry import StaticLanguageRegistry
from i18n_datastore.messages.service import I18nService

logger = get_module_logger()


def create_message_cache(settings: Optional[I18nSettings] = None) -> MessageCache:
    """Create a message cache reading JSON data under the source root.

    Args:
        settings: Message engine settings (default: from environment).

    Returns:
        MessageCache instance.
    """
    settings = settings or I18nSettings()
    return MessageCache(JSONMessageSource(source_root=settings.source_root))


def create_i18n_service(settings: Optional[I18nSettings] = None) -> I18nService:
    """Create and configure an I18nService.

    Args:
        settings: Message engine settings (default: from environment).

    Returns:
        I18nService: Configured service.

    Raises:
        OSError: If a configured registry or fallbacks file cannot be read.
        ValueError: If a configured data file has the wrong shape.

    Usage:
        service = create_i18n_service()

        service = create_i18n_service(I18nSettings(source_root=Path("/srv/i18n")))
    """
    settings = settings or I18nSettings()

    service = I18nService(
        cache=create_message_cache(settings),
        registry=StaticLanguageRegistry.from_yaml(settings.language_names_file),
        fallbacks=StaticFallbackProvider.from_yaml(settings.fallbacks_file),
        settings=settings,
    )

    logger.info(
        "i18n_service_created",
        source_root=str(settings.source_root),
        base_language=settings.base_language,
        content_language=settings.content_language,
    )
    return service
