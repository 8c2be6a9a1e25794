"""Shared fixtures for all grammardocs tests."""

import pytest

from grammardocs.infrastructure.services import (
    get_settings,
    get_translation_service,
)


@pytest.fixture(autouse=True)
def isolated_services(monkeypatch):
    """Give every test a fresh English translation service.

    The provider singletons own process-wide state (settings and the active
    locale); they are rebuilt before and discarded after each test.
    """
    monkeypatch.setenv("I18N_LOCALE", "en")
    get_settings.cache_clear()
    get_translation_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_translation_service.cache_clear()
