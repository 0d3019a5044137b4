"""Module-level entry points backed by the application-scoped service.

Usage:
    from i18n_datastore.api import load_messages

    ds = load_messages("Infobox", "Common")
    ds.msg("title")
"""

from typing import Any, Optional

from i18n_datastore.messages import Datastore, InvocationContext
from i18n_datastore.services import get_i18n_service


def load_messages(*sources: Any, context: Optional[InvocationContext] = None) -> Datastore:
    """Build a datastore over ``sources``; see ``I18nService.load_messages``."""
    return get_i18n_service().load_messages(*sources, context=context)


def get_msg(context: Optional[InvocationContext]) -> str:
    """Resolve a message from frame arguments; see ``I18nService.get_msg``."""
    return get_i18n_service().get_msg(context)


def get_ambient_language(context: Optional[InvocationContext] = None) -> str:
    """Resolve the ambient language of a request."""
    return get_i18n_service().get_lang(context)


get_lang = get_ambient_language
