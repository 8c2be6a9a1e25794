"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from grammardocs.infrastructure.configuration import Settings
from grammardocs.infrastructure.i18n.factory import create_translator
from grammardocs.infrastructure.i18n.service import TranslationService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    This instance owns the process-wide locale: set_locale() on it changes
    the language of every later text() call. It performs no locking.

    Returns:
        TranslationService: Cached service backed by the packaged catalogs.

    Usage:
        from grammardocs.infrastructure.services import get_translation_service

        get_translation_service().set_locale("de")
        message = get_translation_service().text(TemplateKind, "unknowntype", kind)
    """
    settings = get_settings()
    return TranslationService(translator=create_translator(settings=settings.i18n))
