"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_common_document,
    make_settings,
    make_translator,
)

__all__ = [
    "make_common_document",
    "make_settings",
    "make_translator",
]
