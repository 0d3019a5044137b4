"""Message text formatting: argument substitution, markup detection and
placeholder escaping."""

import re
from typing import Any, Optional, Sequence

from i18n_datastore.messages.models import MarkupExpander

ARGUMENT_PATTERN = re.compile(r"\$(\d+)")

# Structural wikitext markers; plain text skips expansion entirely.
MARKUP_PATTERNS = (
    re.compile(r"----"),
    re.compile(r"^[;:*#] ", re.MULTILINE),
    re.compile(r"^=+ *[^\n|]+ =+$", re.MULTILINE),
    re.compile(r"<[^<>]*>"),
    re.compile(r"''"),
    re.compile(r"\[\[.*?\]\]", re.DOTALL),
    re.compile(r"\{\{.*?\}\}", re.DOTALL),
)

WHITESPACE = " \t\r\n\f"

NOWIKI_ESCAPES = str.maketrans(
    {
        '"': "&#34;",
        "&": "&#38;",
        "'": "&#39;",
        "<": "&#60;",
        "=": "&#61;",
        ">": "&#62;",
        "[": "&#91;",
        "]": "&#93;",
        "{": "&#123;",
        "|": "&#124;",
        "}": "&#125;",
    }
)


def substitute_args(message: str, args: Sequence[Any]) -> str:
    """Replace ``$n`` placeholders with the n-th argument (1-based).

    Placeholders without a matching argument are left as they are.

    Args:
        message: Message text.
        args: Substitution values, stringified on use.

    Returns:
        Message with arguments substituted.
    """

    def replace(match: re.Match) -> str:
        index = int(match.group(1))
        if 1 <= index <= len(args):
            return str(args[index - 1])
        return match.group(0)

    return ARGUMENT_PATTERN.sub(replace, message)


def contains_markup(message: str) -> bool:
    """Check whether a message contains unprocessed markup."""
    return any(pattern.search(message) for pattern in MARKUP_PATTERNS)


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def nowiki(text: str) -> str:
    """Escape characters that would otherwise be read as markup."""
    return text.translate(NOWIKI_ESCAPES)


def placeholder(key: str) -> str:
    """Visible stand-in for a message that could not be resolved."""
    return nowiki(f"<{key}>")


def finalize(message: str, expander: Optional[MarkupExpander] = None) -> str:
    """Trim a message and expand its markup when an expander is available.

    Args:
        message: Resolved message text.
        expander: Markup expansion facility of the current invocation.

    Returns:
        Text ready to be returned to the caller.
    """
    text = trim(message)
    if expander is not None and contains_markup(message):
        return expander(text)
    return text
