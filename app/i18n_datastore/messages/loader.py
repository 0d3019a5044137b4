"""Message data loading and caching.

Defines the raw message source contract, the JSON implementation reading
``<source>/i18n/<language>.i18n.json`` files, and the cache that memoizes
one table per (source, language).
"""

import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Tuple

from i18n_datastore.logging import get_module_logger
from i18n_datastore.messages.models import MessageTable

logger = get_module_logger()


class MessageSource(ABC):
    """Abstract base for raw message sources.

    Implementations map a source identifier to a location and read the
    flat key -> string data stored there for one language.
    """

    @abstractmethod
    def resolve(self, source_id: str) -> str:
        """Resolve a source identifier to the location used as cache key.

        Args:
            source_id: Identifier supplied by the caller.

        Returns:
            Resolved location.
        """
        pass

    @abstractmethod
    def read(self, source: str, language: str) -> Mapping[str, str]:
        """Read the messages of a resolved source in one language.

        Args:
            source: Location returned by ``resolve``.
            language: Language code.

        Returns:
            Mapping of message key to message text.

        Raises:
            OSError: If the data cannot be read.
            ValueError: If the data cannot be parsed.
        """
        pass


class JSONMessageSource(MessageSource):
    """Message source reading JSON files laid out per language.

    Expects ``<source>/i18n/<language>.i18n.json`` containing a flat JSON
    object of message keys to strings.

    Attributes:
        source_root: Directory relative identifiers are resolved against.
    """

    def __init__(self, source_root: Path = Path(".")):
        self.source_root = Path(source_root)

    def resolve(self, source_id: str) -> str:
        path = Path(source_id)
        if not path.is_absolute():
            path = self.source_root / path
        return str(path.resolve())

    def data_path(self, source: str, language: str) -> Path:
        return Path(source) / "i18n" / f"{language}.i18n.json"

    def read(self, source: str, language: str) -> Mapping[str, str]:
        path = self.data_path(source, language)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Message file must contain a JSON object: {path}")

        invalid = [key for key, value in data.items() if not isinstance(value, str)]
        if invalid:
            raise ValueError(f"Non-string messages {invalid} in {path}")

        return data


class MessageCache:
    """Process-wide memo of message tables keyed by (source, language).

    Loads are attempted once per key: a failed read is cached as an empty
    table and never retried. The cache is append-only and guarded by a lock
    so concurrent requests may share it.

    Attributes:
        source: MessageSource the tables are read from.
    """

    def __init__(self, source: MessageSource):
        self.source = source
        self._tables: Dict[Tuple[str, str], MessageTable] = {}
        self._lock = threading.Lock()

    def resolve(self, source_id: str) -> str:
        """Resolve a source identifier through the underlying source."""
        return self.source.resolve(source_id)

    def load(self, source: str, language: str) -> MessageTable:
        """Return the message table for a resolved source and language.

        Never raises: read and parse failures produce an empty table.

        Args:
            source: Resolved source location.
            language: Language code.

        Returns:
            MessageTable, possibly empty.
        """
        key = (source, language)
        with self._lock:
            table = self._tables.get(key)
        if table is not None:
            return table

        table = self._read(source, language)

        with self._lock:
            # Loads are idempotent; keep whichever table landed first
            return self._tables.setdefault(key, table)

    def clear(self) -> None:
        """Drop every cached table."""
        with self._lock:
            self._tables.clear()
        logger.info("cleared_message_cache")

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)

    def _read(self, source: str, language: str) -> MessageTable:
        try:
            messages = self.source.read(source, language)
        except FileNotFoundError:
            logger.debug("message_data_missing", source=source, language=language)
            return MessageTable.unavailable(source, language)
        except (OSError, ValueError) as e:
            logger.warning(
                "message_data_unavailable",
                source=source,
                language=language,
                error=str(e),
            )
            return MessageTable.unavailable(source, language)

        logger.debug(
            "loaded_message_table",
            source=source,
            language=language,
            message_count=len(messages),
        )
        return MessageTable(source=source, language=language, messages=messages)
