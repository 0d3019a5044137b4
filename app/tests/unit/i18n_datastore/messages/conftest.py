"""Feature-level fixtures for message engine tests.

Provides message sources on disk and wired collaborators for datastores.
"""

import pytest

from i18n_datastore.configuration import I18nSettings
from i18n_datastore.messages import (
    Datastore,
    I18nService,
    JSONMessageSource,
    LanguageResolver,
    MessageCache,
)
from tests.factories.i18n import (
    make_context,
    make_fallbacks,
    make_registry,
    write_message_source,
)


@pytest.fixture
def source_root(tmp_path):
    """Create message sources under a temporary root.

    Returns a directory structure like:
    - Alpha/i18n/{en,fr,de}.i18n.json
    - Beta/i18n/{en,fr}.i18n.json
    - Broken/i18n/en.i18n.json (invalid JSON)
    """
    write_message_source(
        tmp_path,
        "Alpha",
        {
            "en": {
                "greeting": "Hello $1, you have $2 items",
                "only-en": "English only",
                "shared": "Alpha shared",
                "count": "count",
                "label": "Label A",
                "markup": "  '''Bold''' text  ",
                "padded": "\n  padded text \t",
                "empty": "",
            },
            "fr": {
                "greeting": "Bonjour $1, vous avez $2 articles",
                "shared": "Alpha partagé",
            },
            "fr-x": {
                "variant": "Variante",
            },
            "de": {
                "count": "Zahl",
                "greeting": "Hallo $1, du hast $2 Artikel",
            },
        },
    )
    write_message_source(
        tmp_path,
        "Beta",
        {
            "en": {
                "beta-only": "From Beta",
                "shared": "Beta shared",
                "label": "Label B",
            },
            "fr": {
                "beta-only": "De Beta",
            },
        },
    )
    broken = tmp_path / "Broken" / "i18n"
    broken.mkdir(parents=True)
    (broken / "en.i18n.json").write_text("{not json", encoding="utf-8")
    return tmp_path


@pytest.fixture
def registry():
    return make_registry()


@pytest.fixture
def fallbacks():
    return make_fallbacks()


@pytest.fixture
def message_cache(source_root):
    """Fresh cache per test over the temporary source root."""
    return MessageCache(JSONMessageSource(source_root=source_root))


@pytest.fixture
def resolver(registry):
    return LanguageResolver(registry, base_language="en", debug_language="qqx")


@pytest.fixture
def context():
    """Context with no invocation frame and English content."""
    return make_context()


@pytest.fixture
def make_datastore(message_cache, resolver, fallbacks, context):
    """Factory fixture building datastores over the test sources."""

    def _make(*sources, ctx=None):
        return Datastore.from_sources(
            sources,
            cache=message_cache,
            resolver=resolver,
            fallbacks=fallbacks,
            context=ctx or context,
        )

    return _make


@pytest.fixture
def i18n_settings(source_root):
    return I18nSettings(source_root=source_root)


@pytest.fixture
def service(message_cache, registry, fallbacks, i18n_settings):
    return I18nService(
        cache=message_cache,
        registry=registry,
        fallbacks=fallbacks,
        settings=i18n_settings,
    )
