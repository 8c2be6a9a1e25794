"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    key_of,
    make_locale,
    make_translation_catalog,
    write_properties,
)

__all__ = [
    "key_of",
    "make_locale",
    "make_translation_catalog",
    "write_properties",
]
