"""Message service for dependency injection.

Bundles the collaborators a datastore needs (cache, registry, fallbacks,
resolver, settings) behind one object so hosts build datastores without
wiring them by hand.
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

from i18n_datastore.configuration import I18nSettings
from i18n_datastore.logging import bind_request_context, get_module_logger
from i18n_datastore.messages.datastore import Datastore
from i18n_datastore.messages.errors import InvalidCallError
from i18n_datastore.messages.fallbacks import FallbackProvider
from i18n_datastore.messages.loader import MessageCache
from i18n_datastore.messages.models import (
    InvocationContext,
    InvocationFrame,
    PageTitle,
)
from i18n_datastore.messages.registry import LanguageNameRegistry
from i18n_datastore.messages.resolvers import LANGUAGE_ARGUMENT, LanguageResolver

logger = get_module_logger()


class I18nService:
    """Class-based entry point to the message engine.

    Usage:
        service = create_i18n_service()

        with service.request_scope(page="Module:Infobox/fr") as request:
            context = request.new_context(title="Module:Infobox/fr")
            ds = request.load_messages("Infobox", context=context)
            ds.msg("title")

    Attributes:
        cache: Message cache shared by every datastore built here.
        registry: Language name registry used for validation.
        fallbacks: Fallback language provider.
        resolver: Ambient language resolver.
        settings: Message engine settings.
    """

    def __init__(
        self,
        cache: MessageCache,
        registry: LanguageNameRegistry,
        fallbacks: FallbackProvider,
        settings: Optional[I18nSettings] = None,
        resolver: Optional[LanguageResolver] = None,
    ):
        self.cache = cache
        self.registry = registry
        self.fallbacks = fallbacks
        self.settings = settings or I18nSettings()
        self.resolver = resolver or LanguageResolver(
            registry,
            base_language=self.settings.base_language,
            debug_language=self.settings.debug_language,
        )

    def new_context(
        self,
        frame: Optional[InvocationFrame] = None,
        title: str = "",
        content_language: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> InvocationContext:
        """Build an invocation context with the configured content language.

        Args:
            frame: Current invocation frame.
            title: Title of the page being rendered.
            content_language: Overrides the configured content language.
            locale: Process locale signal.

        Returns:
            InvocationContext instance.
        """
        return InvocationContext(
            frame=frame,
            title=PageTitle.from_text(title),
            content_language=content_language or self.settings.content_language,
            locale=locale,
        )

    def load_messages(
        self, *sources: Any, context: Optional[InvocationContext] = None
    ) -> Datastore:
        """Build a datastore over ``sources`` in priority order.

        Args:
            *sources: Source identifiers.
            context: Invocation context of the request.

        Returns:
            Datastore instance.

        Raises:
            ConfigurationError: If no valid source identifier is supplied.
        """
        return Datastore.from_sources(
            sources,
            cache=self.cache,
            resolver=self.resolver,
            fallbacks=self.fallbacks,
            context=context or self.new_context(),
            base_language=self.settings.base_language,
            debug_language=self.settings.debug_language,
        )

    def get_lang(self, context: Optional[InvocationContext] = None) -> str:
        """Resolve the ambient language of a request.

        Args:
            context: Invocation context. The configured defaults if omitted.

        Returns:
            Language code.
        """
        return self.resolver.resolve(context or self.new_context())

    def get_msg(self, context: Optional[InvocationContext]) -> str:
        """Resolve a message from frame arguments.

        Positional argument 1 names the source and 2 the message key;
        arguments from 3 onwards are substituted into the message. A valid
        ``uselang`` argument selects the language for this message.

        Args:
            context: Invocation context whose frame carries the arguments.

        Returns:
            Localized message.

        Raises:
            InvalidCallError: If the frame, source or key is missing.
        """
        frame = context.frame if context else None
        if frame is None or not frame.get(1) or not frame.get(2):
            logger.error("missing_get_msg_arguments")
            raise InvalidCallError("missing arguments in get_msg")

        ds = self.load_messages(frame.get(1), context=context)
        ds.in_lang(frame.get(LANGUAGE_ARGUMENT))
        return ds.msg({"key": frame.get(2), "args": frame.positional(start=3)})

    @contextmanager
    def request_scope(
        self, correlation_id: Optional[str] = None, **log_context: Any
    ) -> Generator["I18nService", None, None]:
        """Serve one top-level request with its own message cache.

        The yielded service shares every collaborator except the cache, so
        data loaded for one request never leaks into the next. Request
        context is bound to all logs emitted inside the block.

        Args:
            correlation_id: Request identifier. Generated if omitted.
            **log_context: Extra context for logs emitted in the block.

        Yields:
            I18nService scoped to the request.
        """
        scoped = I18nService(
            cache=MessageCache(self.cache.source),
            registry=self.registry,
            fallbacks=self.fallbacks,
            settings=self.settings,
            resolver=self.resolver,
        )
        with bind_request_context(correlation_id=correlation_id, **log_context):
            logger.debug("request_scope_started")
            yield scoped
            logger.debug("request_scope_finished", cached_tables=len(scoped.cache))
