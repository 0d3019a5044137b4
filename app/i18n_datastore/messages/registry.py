"""Language name registry.

Validates language codes by display name lookup: a code is valid when the
registry knows a non-empty name for it.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

import yaml

from i18n_datastore.logging import get_module_logger

logger = get_module_logger()

DEFAULT_LANGUAGE_NAMES_FILE = Path(__file__).parent / "data" / "language_names.yml"


class LanguageNameRegistry(Protocol):
    """Source of language display names."""

    def display_name(self, code: str) -> str:
        """Return the display name of ``code``, or an empty string if unknown."""
        ...


class StaticLanguageRegistry:
    """Registry backed by an in-memory code -> name mapping.

    Lookups are case-insensitive on the code, the way language codes are
    compared by wiki hosts.
    """

    def __init__(self, names: Mapping[str, str]):
        self._names = {
            str(code).lower(): str(name) for code, name in names.items() if name
        }

    @classmethod
    def from_yaml(cls, path: Optional[Path] = None) -> "StaticLanguageRegistry":
        """Load display names from a YAML mapping.

        Args:
            path: YAML file of ``code: name`` pairs. Defaults to the bundled
                registry.

        Returns:
            StaticLanguageRegistry instance.

        Raises:
            ValueError: If the file is not a YAML mapping.
        """
        path = Path(path or DEFAULT_LANGUAGE_NAMES_FILE)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Language names file must contain a mapping: {path}")

        logger.info("loaded_language_names", file=str(path), language_count=len(data))
        return cls(data)

    def display_name(self, code: str) -> str:
        return self._names.get(code.lower(), "")

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and bool(self.display_name(code))

    def __len__(self) -> int:
        return len(self._names)


def is_valid_code(registry: LanguageNameRegistry, code: Any) -> bool:
    """Check whether ``code`` is a usable language code.

    Args:
        registry: Registry to look the code up in.
        code: Candidate value, of any type.

    Returns:
        True if ``code`` is a non-empty string with a known display name.
    """
    return isinstance(code, str) and code != "" and bool(registry.display_name(code))
