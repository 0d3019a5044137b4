"""Message datastore.

A datastore holds an ordered list of message sources and the language
configuration used to resolve messages from them. Sources are consulted in
the order they were supplied; the first eligible source that resolves a key
wins.

Language and source overrides come in two flavours:
- persistent: ``use_lang``, ``use_user_lang``, ``use_content_lang``
- one-shot: ``in_lang``, ``in_user_lang``, ``in_content_lang``,
  ``from_source`` or the ``lang``/``sources`` arguments of ``msg``. These
  apply to the next ``msg``/``parameter`` call only.

Usage:
    ds = service.load_messages("Dev", "Common")
    ds.msg("greeting", "Ada")
    ds.in_lang("fr").msg("greeting", "Ada")
    ds.msg({"key": "greeting", "args": ["Ada"], "lang": "de"})
"""

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from i18n_datastore.logging import get_module_logger
from i18n_datastore.messages.errors import ConfigurationError, InvalidCallError
from i18n_datastore.messages.fallbacks import FallbackProvider
from i18n_datastore.messages.formatting import finalize, placeholder, substitute_args
from i18n_datastore.messages.loader import MessageCache
from i18n_datastore.messages.models import InvocationContext, MessageOptions
from i18n_datastore.messages.resolvers import LanguageResolver

logger = get_module_logger()


class Datastore:
    """Ordered message sources with language configuration.

    Attributes:
        sources: Source identifiers in priority order.
        source_index: Source identifier -> 1-based position.
        default_language: Language messages are served in by default.
        context: Invocation context of the request the datastore serves.
    """

    def __init__(
        self,
        sources: Sequence[str],
        cache: MessageCache,
        resolver: LanguageResolver,
        fallbacks: FallbackProvider,
        context: InvocationContext,
        base_language: str = "en",
        debug_language: str = "qqx",
    ):
        self.cache = cache
        self.resolver = resolver
        self.fallbacks = fallbacks
        self.context = context
        self.base_language = base_language
        self.debug_language = debug_language

        self.source_index: Dict[str, int] = {}
        for source_id in sources:
            if source_id not in self.source_index:
                self.source_index[source_id] = len(self.source_index) + 1
        self.sources: Tuple[str, ...] = tuple(self.source_index)
        self._paths: Tuple[str, ...] = tuple(cache.resolve(s) for s in self.sources)
        self.log = logger.bind(sources=list(self.sources))

        self.default_language = context.content_language
        self._pending = MessageOptions()
        self.use_user_lang()

    @classmethod
    def from_sources(
        cls,
        sources: Iterable[Any],
        cache: MessageCache,
        resolver: LanguageResolver,
        fallbacks: FallbackProvider,
        context: Optional[InvocationContext] = None,
        base_language: str = "en",
        debug_language: str = "qqx",
    ) -> "Datastore":
        """Build a datastore from caller-supplied source identifiers.

        Non-string and empty identifiers are skipped.

        Args:
            sources: Source identifiers in priority order.
            cache: Message cache shared by the request.
            resolver: Ambient language resolver.
            fallbacks: Fallback language provider.
            context: Invocation context. An empty context if omitted.
            base_language: Ultimate fallback language.
            debug_language: Reserved language rendering message keys.

        Returns:
            Datastore instance.

        Raises:
            ConfigurationError: If no valid source identifier is supplied.
        """
        valid = [s for s in sources if isinstance(s, str) and s != ""]
        if not valid:
            logger.error("no_message_source_supplied")
            raise ConfigurationError("no source supplied to load_messages")

        return cls(
            valid,
            cache=cache,
            resolver=resolver,
            fallbacks=fallbacks,
            context=context or InvocationContext(),
            base_language=base_language,
            debug_language=debug_language,
        )

    # Message getters

    def msg(
        self,
        key: Any = None,
        *args: Any,
        lang: Optional[str] = None,
        sources: Optional[Sequence[str]] = None,
    ) -> str:
        """Return the localized message for ``key``.

        ``$n`` placeholders in the message are replaced by the n-th
        positional argument. The key may also be a mapping with ``key``,
        ``args``, ``lang`` and ``sources`` entries.

        Args:
            key: Message key, or named options mapping.
            *args: Substitution arguments.
            lang: One-shot language for this call.
            sources: Source identifiers eligible to answer this call.

        Returns:
            Localized message, or an escaped ``<key>`` placeholder.

        Raises:
            InvalidCallError: If no key is supplied.
        """
        if isinstance(key, Mapping):
            named = key
            key = named.get("key")
            args = tuple(named.get("args") or args)
            lang = named.get("lang", lang)
            sources = named.get("sources", sources)

        if not key:
            self.log.error("missing_message_key")
            raise InvalidCallError("missing arguments in Datastore.msg")

        options = self._consume_options(lang, sources)
        eligible = set(self.sources if options.sources is None else options.sources)
        language = options.language or self.default_language

        for source_id, path in zip(self.sources, self._paths):
            message = self._lookup(path, key, self._language_chain(language))
            if message is None or source_id not in eligible:
                continue
            if args:
                message = substitute_args(message, args)
            if language != self.debug_language:
                return finalize(message, self.context.expander)

        self.log.debug("message_key_unresolved", key=key, language=language)
        return placeholder(key)

    def parameter(self, key: Any, args: Optional[Mapping[str, Any]]) -> Optional[Any]:
        """Find a template parameter by its localized name.

        Always resolves names in the content language. Sources are tried in
        order until one yields a name present in ``args``.

        Args:
            key: Parameter key in the datastore.
            args: Template arguments to find the parameter in.

        Returns:
            The parameter's value, or None if not present.

        Raises:
            InvalidCallError: If the key or the arguments are missing.
        """
        if not key or args is None:
            self.log.error("missing_parameter_arguments", key=key)
            raise InvalidCallError("missing arguments in Datastore.parameter")

        self._consume_options(None, None)
        chain = self._language_chain(self.context.content_language)

        for path in self._paths:
            for language in chain:
                name = self.cache.load(path, language).get(key)
                if name is not None and args.get(name) is not None:
                    return args[name]

        return None

    # Language and source configuration

    def get_lang(self) -> str:
        """Return the default language messages are served in."""
        return self.default_language

    def use_lang(self, code: Any) -> "Datastore":
        """Set the default language, ignoring unknown codes."""
        language = self.resolver.canonical_code(code)
        if language is not None:
            self.default_language = language
        return self

    def in_lang(self, code: Any) -> "Datastore":
        """Use ``code`` for the next call only, ignoring unknown codes."""
        language = self.resolver.canonical_code(code)
        if language is not None:
            self._pending = replace(self._pending, language=language)
        return self

    def use_user_lang(self) -> "Datastore":
        """Set the default language to the ambient language of the request."""
        self.default_language = self.resolver.resolve(self.context) or self.default_language
        return self

    def in_user_lang(self) -> "Datastore":
        """Use the ambient language of the request for the next call only."""
        language = self.resolver.resolve(self.context)
        if language:
            self._pending = replace(self._pending, language=language)
        return self

    def use_content_lang(self) -> "Datastore":
        """Set the default language to the content language."""
        self.default_language = self.context.content_language
        return self

    def in_content_lang(self) -> "Datastore":
        """Use the content language for the next call only."""
        self._pending = replace(self._pending, language=self.context.content_language)
        return self

    def from_source(self, *source_ids: Any) -> "Datastore":
        """Limit the next message call to a subset of sources.

        Unknown identifiers are dropped. Priority stays the order the
        sources were loaded in.

        Args:
            *source_ids: Source identifiers to use.

        Returns:
            Datastore instance.
        """
        selection = self._known_sources(source_ids)
        if selection is not None:
            self._pending = replace(self._pending, sources=selection)
        return self

    # Internals

    def _consume_options(
        self, lang: Optional[str], sources: Optional[Sequence[str]]
    ) -> MessageOptions:
        call_options = MessageOptions(
            language=self.resolver.canonical_code(lang),
            sources=self._known_sources(sources or ()),
        )
        options = self._pending.merged_with(call_options)
        self._pending = MessageOptions()
        return options

    def _known_sources(self, source_ids: Sequence[Any]) -> Optional[Tuple[str, ...]]:
        if not source_ids:
            return None
        known = []
        for source_id in source_ids:
            if isinstance(source_id, str) and source_id in self.source_index:
                known.append(source_id)
            else:
                self.log.debug("unknown_source_ignored", source=source_id)
        return tuple(known)

    def _language_chain(self, language: str) -> List[str]:
        chain = [language, *self.fallbacks.fallbacks_for(language), self.base_language]
        return list(dict.fromkeys(chain))

    def _lookup(self, path: str, key: str, chain: Sequence[str]) -> Optional[str]:
        for language in chain:
            message = self.cache.load(path, language).get(key)
            if message is not None:
                return message
        return None


def msg(datastore: Optional[Datastore], key: Any = None, *args: Any, **options: Any) -> str:
    """Resolve a message from ``datastore``; see ``Datastore.msg``.

    Raises:
        InvalidCallError: If the datastore or key is missing.
    """
    if datastore is None:
        raise InvalidCallError("missing arguments in Datastore.msg")
    return datastore.msg(key, *args, **options)


def parameter(
    datastore: Optional[Datastore], key: Any, args: Optional[Mapping[str, Any]]
) -> Optional[Any]:
    """Resolve a parameter from ``datastore``; see ``Datastore.parameter``.

    Raises:
        InvalidCallError: If the datastore, key or arguments are missing.
    """
    if datastore is None:
        raise InvalidCallError("missing arguments in Datastore.parameter")
    return datastore.parameter(key, args)
