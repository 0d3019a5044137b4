"""Message engine - localized message resolution with language fallbacks.

Main components:
- models: MessageTable, MessageOptions, InvocationFrame, InvocationContext
- loader: MessageSource, JSONMessageSource and MessageCache
- registry / fallbacks: language validation and fallback lists
- resolvers: LanguageResolver for the ambient language
- datastore: Datastore with msg/parameter resolution
- service / factory: I18nService and its factory
"""

from i18n_datastore.messages.datastore import Datastore, msg, parameter
from i18n_datastore.messages.errors import (
    ConfigurationError,
    I18nError,
    InvalidCallError,
)
from i18n_datastore.messages.factory import create_i18n_service, create_message_cache
from i18n_datastore.messages.fallbacks import FallbackProvider, StaticFallbackProvider
from i18n_datastore.messages.loader import JSONMessageSource, MessageCache, MessageSource
from i18n_datastore.messages.models import (
    InvocationContext,
    InvocationFrame,
    MessageOptions,
    MessageTable,
    PageTitle,
)
from i18n_datastore.messages.registry import (
    LanguageNameRegistry,
    StaticLanguageRegistry,
    is_valid_code,
)
from i18n_datastore.messages.resolvers import LanguageResolver
from i18n_datastore.messages.service import I18nService

__all__ = [
    "ConfigurationError",
    "Datastore",
    "FallbackProvider",
    "I18nError",
    "I18nService",
    "InvalidCallError",
    "InvocationContext",
    "InvocationFrame",
    "JSONMessageSource",
    "LanguageNameRegistry",
    "LanguageResolver",
    "MessageCache",
    "MessageOptions",
    "MessageSource",
    "MessageTable",
    "PageTitle",
    "StaticFallbackProvider",
    "StaticLanguageRegistry",
    "create_i18n_service",
    "create_message_cache",
    "is_valid_code",
    "msg",
    "parameter",
]
