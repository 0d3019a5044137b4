"""Message engine models.

Defines message tables, per-call options and the invocation context the
language resolver reads its signals from.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

MarkupExpander = Callable[[str], str]


@dataclass(frozen=True)
class MessageTable:
    """Messages of one source in one language.

    Frozen so a cached table can be shared by every datastore. A table that
    could not be read is empty and has ``loaded`` set to False.

    Attributes:
        source: Resolved source path the table was read from.
        language: Language code of the messages.
        messages: Read-only mapping of message key to message text.
        loaded: Whether the underlying data was read successfully.
    """

    source: str
    language: str
    messages: Mapping[str, str] = field(default_factory=dict)
    loaded: bool = True

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    @classmethod
    def unavailable(cls, source: str, language: str) -> "MessageTable":
        """Create the empty table cached for a failed load."""
        return cls(source=source, language=language, messages={}, loaded=False)

    def get(self, key: str) -> Optional[str]:
        """Retrieve a message by key.

        Args:
            key: Message key.

        Returns:
            Message text, or None if not present.
        """
        return self.messages.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.messages

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True)
class MessageOptions:
    """One-shot resolution options.

    Attributes:
        language: Language to resolve in instead of the datastore default.
        sources: Source identifiers eligible to return a message. ``None``
            means every source; an empty tuple means none.
    """

    language: Optional[str] = None
    sources: Optional[Tuple[str, ...]] = None

    def merged_with(self, other: "MessageOptions") -> "MessageOptions":
        """Return options where values set on ``other`` take precedence."""
        return MessageOptions(
            language=other.language if other.language is not None else self.language,
            sources=other.sources if other.sources is not None else self.sources,
        )


@dataclass
class InvocationFrame:
    """Arguments of one template/module invocation.

    Positional arguments use 1-based integer keys, named arguments use
    string keys, mirroring how wiki frames expose them.

    Attributes:
        args: Frame arguments.
        parent: Enclosing invocation, if any.
        expander: Markup expansion facility available to this frame.
    """

    args: Dict[Any, str] = field(default_factory=dict)
    parent: Optional["InvocationFrame"] = None
    expander: Optional[MarkupExpander] = None

    def get(self, name: Any) -> Optional[str]:
        return self.args.get(name)

    def positional(self, start: int = 1) -> List[str]:
        """Return contiguous positional arguments from ``start`` onwards."""
        values = []
        index = start
        while index in self.args:
            values.append(self.args[index])
            index += 1
        return values


@dataclass(frozen=True)
class PageTitle:
    """Title of the page being rendered.

    Attributes:
        text: Full title text (e.g. "Module:Infobox/fr").
        subpage_text: Text after the last slash, or the full text.
        is_subpage: Whether the title has a parent page.
    """

    text: str = ""
    subpage_text: str = ""
    is_subpage: bool = False

    @classmethod
    def from_text(cls, text: str) -> "PageTitle":
        """Build a title, splitting off the subpage component.

        Args:
            text: Page title (e.g. "Template:Navbox/de").

        Returns:
            PageTitle instance.
        """
        name = text.split(":", 1)[-1]
        if "/" in name:
            parent, _, subpage = name.rpartition("/")
            if parent:
                return cls(text=text, subpage_text=subpage, is_subpage=True)
        return cls(text=text, subpage_text=name, is_subpage=False)


@dataclass
class InvocationContext:
    """Ambient signals available to a top-level request.

    Attributes:
        frame: Current invocation frame, None outside an invocation.
        title: Page currently being rendered.
        content_language: Content language code of the host.
        locale: Process locale string (e.g. "fr_FR.UTF-8"). Read from the
            process when None.
    """

    frame: Optional[InvocationFrame] = None
    title: PageTitle = field(default_factory=PageTitle)
    content_language: str = "en"
    locale: Optional[str] = None

    @property
    def parent_frame(self) -> Optional[InvocationFrame]:
        return self.frame.parent if self.frame else None

    @property
    def expander(self) -> Optional[MarkupExpander]:
        """Markup expander of the current or parent frame, if any."""
        for frame in (self.frame, self.parent_frame):
            if frame is not None and frame.expander is not None:
                return frame.expander
        return None
