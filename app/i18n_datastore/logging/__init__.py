"""Structured logging infrastructure.

Centralized logging configuration using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - add_app_info(): Processor adding app name/version to log entries
    - build_processors(): Processor chain for console or JSON output
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context
"""

from i18n_datastore.logging.setup import (
    add_app_info,
    build_processors,
    configure_logging,
    get_module_logger,
)
from i18n_datastore.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)

__all__ = [
    "add_app_info",
    "build_processors",
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
]
