"""Request-scoped log context.

Every log line emitted while one resolution request is served carries the
request's correlation id and whatever page or frame details the host binds.

Usage:
    with bind_request_context(page="Module:Infobox/fr"):
        datastore.msg("title")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog

CORRELATION_ID = "correlation_id"


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind request context to the logs emitted inside the block.

    Values bound by an enclosing block are restored on exit.

    Args:
        correlation_id: Request identifier. A UUID4 if omitted.
        **extra_context: Extra key/value pairs; ``None`` values are skipped.

    Yields:
        The correlation id bound for the block.
    """
    bound = {k: v for k, v in extra_context.items() if v is not None}
    bound[CORRELATION_ID] = correlation_id or str(uuid.uuid4())

    with structlog.contextvars.bound_contextvars(**bound):
        yield bound[CORRELATION_ID]


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
