"""Ambient language resolution.

Determines the language a request should be served in from the invocation
context, in precedence order:
1. ``uselang`` argument of the current frame
2. ``uselang`` argument of the parent frame
3. Subpage title of the current page, when it is a language code
4. Process locale signal, when an invocation frame exists
5. Content language
"""

import html
import locale as _locale
from typing import Any, Optional

from i18n_datastore.logging import get_module_logger
from i18n_datastore.messages.models import InvocationContext
from i18n_datastore.messages.registry import LanguageNameRegistry, is_valid_code

logger = get_module_logger()

LANGUAGE_ARGUMENT = "uselang"

# Locale values meaning "no locale configured"
NO_LOCALE_MARKERS = frozenset({"C", "POSIX"})

# Signals left unexpanded by the host; they carry no language
UNRESOLVED_LANGUAGE_TOKENS = frozenset({"<lang>", "⧼lang⧽"})

DEBUG_LANGUAGE_TOKEN = "(lang)"


def read_process_locale() -> str:
    """Return the current process locale name, or "C" when none is set."""
    name, _ = _locale.getlocale(_locale.LC_CTYPE)
    return name or "C"


class LanguageResolver:
    """Resolves the ambient language of a request.

    The process locale signal is read once and reused for the lifetime of
    the resolver.

    Attributes:
        registry: Registry used to validate candidate codes.
        base_language: Language substituted for the no-locale marker.
        debug_language: Language returned for the debug token.
    """

    def __init__(
        self,
        registry: LanguageNameRegistry,
        base_language: str = "en",
        debug_language: str = "qqx",
    ):
        self.registry = registry
        self.base_language = base_language
        self.debug_language = debug_language
        self._user_language: Optional[str] = None
        self._locale_read = False
        self.log = logger.bind(base_language=base_language)

    def canonical_code(self, code: Any) -> Optional[str]:
        """Return the lowercase form of a valid language code, or None.

        Data files and fallback lists are keyed by lowercase codes, so a
        code accepted case-insensitively is stored in that form.
        """
        if not is_valid_code(self.registry, code):
            if code not in (None, ""):
                self.log.debug("invalid_language_code_ignored", code=code)
            return None
        return code.lower()

    def is_valid_code(self, code: Any) -> bool:
        return self.canonical_code(code) is not None

    def user_language(self, context: InvocationContext) -> Optional[str]:
        """Return the cached process locale signal as a language code.

        Args:
            context: Invocation context; its ``locale`` is used on first read.

        Returns:
            Language code derived from the locale, or None when the locale
            is blank.
        """
        if not self._locale_read:
            raw = context.locale if context.locale is not None else read_process_locale()
            raw = raw.strip()
            if raw in NO_LOCALE_MARKERS:
                self._user_language = self.base_language
            else:
                self._user_language = raw.split(".", 1)[0].split("_", 1)[0] or None
            self._locale_read = True
            self.log.debug(
                "resolved_user_language", locale=raw, language=self._user_language
            )
        return self._user_language

    def resolve(self, context: InvocationContext) -> str:
        """Resolve the ambient language for a request.

        Args:
            context: Invocation context carrying the language signals.

        Returns:
            Language code.
        """
        code = context.content_language
        frame = context.frame
        parent = context.parent_frame

        overrides = [f.get(LANGUAGE_ARGUMENT) for f in (frame, parent) if f is not None]
        override = next(
            (c for c in map(self.canonical_code, overrides) if c is not None), None
        )
        subpage = (
            self.canonical_code(context.title.subpage_text)
            if context.title.is_subpage
            else None
        )

        if override is not None:
            code = override
        elif subpage is not None:
            code = subpage
        elif frame is not None or parent is not None:
            signal = self.user_language(context)
            decoded = html.unescape(signal) if signal else None
            if decoded and decoded not in UNRESOLVED_LANGUAGE_TOKENS:
                code = (
                    self.debug_language
                    if decoded == DEBUG_LANGUAGE_TOKEN
                    else signal
                )

        self.log.debug("resolved_ambient_language", language=code)
        return code
