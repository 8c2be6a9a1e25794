"""i18n system - localized strings for exports.

Provides catalog loading from UTF-8 property files, key derivation from
types and labels, and positional message formatting.

Main components:
- models: Locale, TranslationKey, TranslationCatalog
- loader: TranslationLoader and PropertiesTranslationLoader
- translator: Translator with the active locale and its catalog
- service: TranslationService facade
"""

from grammardocs.infrastructure.i18n.loader import (
    PropertiesTranslationLoader,
    TranslationLoader,
)
from grammardocs.infrastructure.i18n.models import (
    Locale,
    TranslationCatalog,
    TranslationKey,
)
from grammardocs.infrastructure.i18n.translator import Translator, format_message

__all__ = [
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "PropertiesTranslationLoader",
    "Translator",
    "format_message",
]
