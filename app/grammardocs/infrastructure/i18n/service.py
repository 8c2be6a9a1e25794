"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, List, Optional, Union

from grammardocs.infrastructure.i18n.factory import create_translator
from grammardocs.infrastructure.i18n.models import Locale
from grammardocs.infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator. The process-wide instance is owned by
    ``grammardocs.infrastructure.services.get_translation_service()``;
    changing its locale affects every later lookup in the process.

    Usage:
        from grammardocs.infrastructure.services import get_translation_service

        translation = get_translation_service()
        translation.set_locale("de")
        message = translation.text(self, "filenotfound", path)
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def text(self, source: Any, label: str, *parameters: Any) -> str:
        """Return the localized message for a type and label, or ""."""
        return self._translator.text(source, label, *parameters)

    def set_locale(self, locale: Union[Locale, str]) -> None:
        """Switch the active locale process-wide."""
        self._translator.set_locale(locale)

    def supported_locales(self) -> List[str]:
        """Get the locale tags listed in the configuration catalog."""
        return self._translator.supported_locales()

    @property
    def locale(self) -> Locale:
        """Active locale."""
        return self._translator.locale

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
