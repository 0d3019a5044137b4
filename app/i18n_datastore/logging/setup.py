"""Structlog configuration for the message engine.

Every engine module logs through ``get_module_logger()``; hosts call
``configure_logging()`` once if they want a different level or renderer
than the one derived from settings.

Usage:
    from i18n_datastore.logging import get_module_logger

    logger = get_module_logger()
    logger.debug("message_key_unresolved", key="title", language="fr")
"""

import inspect
import logging
import sys
from importlib import metadata
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from i18n_datastore.configuration import settings

APP_NAME = "i18n-datastore"

# Log records are still processed under pytest, never emitted
SILENT_LEVEL = logging.CRITICAL + 1


def _app_version() -> str:
    try:
        return metadata.version(APP_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor stamping log entries with the application name and version."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def build_processors(json_output: bool) -> List[Any]:
    """Return the processor chain for engine logs.

    Args:
        json_output: Render JSON lines instead of the development console format.

    Returns:
        Ordered list of structlog processors.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_info(APP_NAME, _app_version()),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog for the engine.

    Args:
        log_level: Level name. ``settings.LOG_LEVEL`` if omitted.
        is_production: JSON output when true. ``settings.is_production`` if omitted.

    Returns:
        Root engine logger.
    """
    silenced = _is_test_environment()
    if silenced:
        processors: List[Any] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
    else:
        json_output = settings.is_production if is_production is None else is_production
        processors = build_processors(json_output)
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=silenced)
    return structlog.stdlib.get_logger(APP_NAME)


_engine_logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return the engine logger bound to the calling module.

    Binds ``component`` (last segment of the module path) and ``module_path``,
    e.g. ``component="loader"`` for ``i18n_datastore.messages.loader``.
    """
    caller = inspect.currentframe()
    caller = caller.f_back if caller is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return _engine_logger.bind(component="unknown")
    return _engine_logger.bind(
        component=module_name.rsplit(".", 1)[-1], module_path=module_name
    )
