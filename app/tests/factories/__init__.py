"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_context,
    make_fallbacks,
    make_frame,
    make_registry,
    write_message_source,
)

__all__ = [
    "make_context",
    "make_fallbacks",
    "make_frame",
    "make_registry",
    "write_message_source",
]
