"""Language fallback lists.

Maps a language code to the ordered languages tried when a message is
missing in that language. The base language is not listed; the datastore
always tries it last.
"""

from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence, Tuple

import yaml

from i18n_datastore.logging import get_module_logger

logger = get_module_logger()

DEFAULT_FALLBACKS_FILE = Path(__file__).parent / "data" / "fallbacks.yml"


class FallbackProvider(Protocol):
    """Source of ordered fallback language lists."""

    def fallbacks_for(self, code: str) -> Sequence[str]:
        """Return fallback languages for ``code`` in priority order."""
        ...


class StaticFallbackProvider:
    """Fallback provider backed by an in-memory mapping."""

    def __init__(self, fallbacks: Mapping[str, Sequence[str]]):
        self._fallbacks = {
            str(code): tuple(str(lang) for lang in chain)
            for code, chain in fallbacks.items()
        }

    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "StaticFallbackProvider":
        """Load fallback lists from a YAML mapping of code to list of codes.

        Args:
            path: YAML file. Defaults to the bundled fallback lists.

        Returns:
            StaticFallbackProvider instance.

        Raises:
            ValueError: If the file is not a mapping of lists.
        """
        path = Path(path or DEFAULT_FALLBACKS_FILE)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict) or not all(
            isinstance(chain, list) for chain in data.values()
        ):
            raise ValueError(f"Fallbacks file must map codes to lists: {path}")

        logger.info("loaded_fallbacks", file=str(path), language_count=len(data))
        return cls(data)

    def fallbacks_for(self, code: str) -> Tuple[str, ...]:
        return self._fallbacks.get(code, ())
