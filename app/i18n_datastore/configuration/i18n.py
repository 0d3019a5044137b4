"""Message engine settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from i18n_datastore.configuration.base import ComponentSettings


class I18nSettings(ComponentSettings):
    """Message resolution configuration.

    Environment Variables:
        I18N_SOURCE_ROOT: Directory that relative source identifiers resolve
            against (default: current directory)
        I18N_BASE_LANGUAGE: Ultimate fallback language (default: en)
        I18N_DEBUG_LANGUAGE: Reserved language that shows message keys
            instead of messages (default: qqx)
        I18N_CONTENT_LANGUAGE: Content language of the host (default: en)
        I18N_LANGUAGE_NAMES_FILE: YAML file overriding the bundled language
            name registry
        I18N_FALLBACKS_FILE: YAML file overriding the bundled fallback lists

    Example:
        ```python
        from i18n_datastore.services import get_settings

        settings = get_settings()
        root = settings.i18n.source_root
        ```
    """

    source_root: Path = Field(
        default=Path("."),
        alias="I18N_SOURCE_ROOT",
        description="Root directory for relative source identifiers",
    )
    base_language: str = Field(
        default="en",
        alias="I18N_BASE_LANGUAGE",
        description="Language used when no other language yields a message",
    )
    debug_language: str = Field(
        default="qqx",
        alias="I18N_DEBUG_LANGUAGE",
        description="Reserved language code rendering message keys",
    )
    content_language: str = Field(
        default="en",
        alias="I18N_CONTENT_LANGUAGE",
        description="Content language used when the invocation does not supply one",
    )
    language_names_file: Optional[Path] = Field(
        default=None,
        alias="I18N_LANGUAGE_NAMES_FILE",
        description="Optional YAML mapping of language code to display name",
    )
    fallbacks_file: Optional[Path] = Field(
        default=None,
        alias="I18N_FALLBACKS_FILE",
        description="Optional YAML mapping of language code to fallback list",
    )
