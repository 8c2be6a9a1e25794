"""Translator holding the active locale and its catalog.

Resolves the message of a (type, label) pair and substitutes positional
parameters. Missing messages degrade to an empty string.
"""

import re
from collections import Counter
from typing import Any, List, Optional, Sequence, Union

from grammardocs.infrastructure.i18n.loader import TranslationLoader
from grammardocs.infrastructure.i18n.models import (
    Locale,
    TranslationCatalog,
    TranslationKey,
)
from grammardocs.infrastructure.logging import get_module_logger

logger = get_module_logger()

SUPPORTED_LOCALES_KEY = "translation"

# 'quoted literal' or {index[,format]}
_MESSAGE_TOKEN = re.compile(r"'([^']*)'|\{(\d+)(?:,[^{}]*)?\}")


def format_message(pattern: str, parameters: Sequence[Any]) -> str:
    """Substitute positional parameters into a message pattern.

    ``{0}``, ``{1}``... are replaced by the matching parameter; an optional
    format part (``{0,number}``) is ignored. Text between single quotes is
    literal and ``''`` yields a single quote. Placeholders without a
    parameter are left untouched.

    Args:
        pattern: Message pattern from the catalog.
        parameters: Positional parameters.

    Returns:
        Formatted message.
    """

    def _replace(match: re.Match) -> str:
        quoted, index = match.group(1), match.group(2)
        if index is None:
            return quoted if quoted else "'"
        position = int(index)
        if position < len(parameters):
            return str(parameters[position])
        return match.group(0)

    return _MESSAGE_TOKEN.sub(_replace, pattern)


class Translator:
    """Resolves localized messages for the active locale.

    Holds two catalogs: the locale independent configuration catalog, read
    once, and the language catalog of the active locale, replaced on every
    set_locale() call. Not thread-safe: callers changing the locale while
    other threads translate must synchronize themselves.

    Attributes:
        loader: TranslationLoader used to read catalogs.
        language_bundle: Base name of the language catalogs.
        configuration_bundle: Base name of the configuration catalog.
        locale: Active Locale.
        catalog: Language catalog of the active locale, None if unavailable.
            Shared with the loader cache when caching is enabled.
        configuration: Configuration catalog (empty if unavailable).
        misses: Count of failed lookups per key.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        locale: Locale,
        language_bundle: str = "language",
        configuration_bundle: str = "configuration",
    ):
        """Initialize Translator and load both catalogs.

        Args:
            loader: TranslationLoader instance for loading catalogs.
            locale: Initial locale.
            language_bundle: Base name of the language catalogs.
            configuration_bundle: Base name of the configuration catalog.
        """
        self.loader = loader
        self.language_bundle = language_bundle
        self.configuration_bundle = configuration_bundle
        self.configuration: TranslationCatalog = (
            loader.load(configuration_bundle) or TranslationCatalog()
        )
        self.locale = locale
        self.catalog: Optional[TranslationCatalog] = loader.load(language_bundle, locale)
        self.misses: Counter = Counter()
        logger.info(
            "initialized_translator",
            locale=locale.tag,
            catalog_loaded=self.catalog is not None,
        )

    def set_locale(self, locale: Union[Locale, str]) -> None:
        """Switch the active locale and load its catalog.

        The new catalog replaces the previous one entirely; entries of the
        previously active locale are never consulted afterwards.

        Args:
            locale: Locale or locale string (e.g. "de", "de_DE").

        Raises:
            ValueError: If a locale string cannot be parsed.
        """
        if isinstance(locale, str):
            locale = Locale.from_string(locale)

        self.locale = locale
        self.catalog = self.loader.load(self.language_bundle, locale)
        logger.info(
            "locale_changed",
            locale=locale.tag,
            catalog_loaded=self.catalog is not None,
        )

    def text(self, source: Any, label: str, *parameters: Any) -> str:
        """Return the localized message for a type and label.

        Args:
            source: A class, or an object whose runtime type names the message.
            label: Message label.
            *parameters: Positional parameters for ``{0}``, ``{1}``...

        Returns:
            Formatted message, or an empty string if no message exists.
        """
        key = TranslationKey.for_source(source, label)
        message = self.catalog.get_message(key) if self.catalog is not None else None

        if message is None:
            self.misses[key.value] += 1
            logger.debug(
                "translation_not_found",
                key=key.value,
                locale=self.locale.tag,
                catalog_loaded=self.catalog is not None,
            )
            return ""

        return format_message(message, parameters)

    def has_message(self, source: Any, label: str) -> bool:
        """Check if the active catalog has a message for a type and label."""
        if self.catalog is None:
            return False
        return self.catalog.has_message(TranslationKey.for_source(source, label))

    def config_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Read a raw entry of the configuration catalog.

        Args:
            key: Configuration key (e.g. "translation").
            default: Value returned when the key is absent.
        """
        value = self.configuration.get_message(key)
        return default if value is None else value

    def supported_locales(self) -> List[str]:
        """Get the locale tags listed in the configuration catalog.

        Returns:
            Trimmed, lowercase tags in catalog order (e.g. ["en", "de"]).
        """
        value = self.config_value(SUPPORTED_LOCALES_KEY, "")
        return [tag.strip().lower() for tag in value.split(",") if tag.strip()]

    def reload(self, force: bool = True) -> None:
        """Read both catalogs again.

        Args:
            force: Bypass the loader cache.
        """
        self.configuration = (
            self.loader.load(self.configuration_bundle, force_reload=force)
            or TranslationCatalog()
        )
        self.catalog = self.loader.load(
            self.language_bundle, self.locale, force_reload=force
        )
        logger.info("reloaded_translations", locale=self.locale.tag, force=force)
