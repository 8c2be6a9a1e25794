"""Feature-level fixtures for i18n system tests.

Provides property-file catalogs on disk and translators reading them.
"""

import pytest

from grammardocs.infrastructure.i18n import (
    Locale,
    PropertiesTranslationLoader,
    Translator,
)
from tests.factories.i18n import Greeter, LoudGreeter, key_of, write_properties


@pytest.fixture
def catalog_dir(tmp_path):
    """Create a directory with sample property files.

    Returns a directory structure like:
    - configuration.properties
    - language.properties (base bundle)
    - language_en.properties
    - language_de.properties
    - language_de_AT.properties
    """
    write_properties(tmp_path, "configuration", {"translation": "en, de"})
    write_properties(
        tmp_path,
        "language",
        {key_of(Greeter, "shared"): "base text"},
    )
    write_properties(
        tmp_path,
        "language_en",
        {
            key_of(Greeter, "greeting"): "Hello, {0}!",
            key_of(Greeter, "farewell"): "Goodbye, {0} and {1}",
            key_of(Greeter, "english_only"): "only in English",
            key_of(LoudGreeter, "greeting"): "HELLO, {0}!",
        },
    )
    write_properties(
        tmp_path,
        "language_de",
        {
            key_of(Greeter, "greeting"): "Grüß dich, {0}!",
            key_of(Greeter, "farewell"): "Tschüss, {0} und {1}",
            key_of(Greeter, "region"): "Deutschland",
        },
    )
    write_properties(
        tmp_path,
        "language_de_AT",
        {key_of(Greeter, "region"): "Österreich"},
    )
    return tmp_path


@pytest.fixture
def properties_loader(catalog_dir):
    """Create PropertiesTranslationLoader without cache."""
    return PropertiesTranslationLoader(catalog_dir, use_cache=False)


@pytest.fixture
def properties_loader_with_cache(catalog_dir):
    """Create PropertiesTranslationLoader with caching enabled."""
    return PropertiesTranslationLoader(catalog_dir, use_cache=True)


@pytest.fixture
def translator(properties_loader):
    """Create English Translator reading the sample catalogs."""
    return Translator(properties_loader, locale=Locale("en"))
