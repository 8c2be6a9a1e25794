"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with the
packaged catalogs and the configured locale.
"""

import locale as host_locale
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Optional, Union

import structlog

from grammardocs.infrastructure.configuration import I18nSettings
from grammardocs.infrastructure.i18n.loader import PropertiesTranslationLoader
from grammardocs.infrastructure.i18n.models import Locale
from grammardocs.infrastructure.i18n.translator import Translator

logger = structlog.get_logger()

FALLBACK_LOCALE = Locale("en")


def default_locale(settings: Optional[I18nSettings] = None) -> Locale:
    """Determine the initial locale.

    Uses I18N_LOCALE when set, then the host locale, then English.
    """
    candidates = [settings.LOCALE if settings else None, host_locale.getlocale()[0]]
    for candidate in candidates:
        if not candidate:
            continue
        try:
            return Locale.from_string(candidate)
        except ValueError:
            logger.warning("invalid_default_locale", locale=candidate)
    return FALLBACK_LOCALE


def create_translator(
    resource_root: Optional[Union[Path, Traversable]] = None,
    locale: Optional[Locale] = None,
    settings: Optional[I18nSettings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    If no resource_root is provided, the catalogs shipped inside the
    configured resource package are used.

    Args:
        resource_root: Directory with the property files (default: packaged locales)
        locale: Initial locale (default: see default_locale())
        settings: I18n settings (default: read from the environment)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If resource_root does not exist

    Usage:
        # Packaged catalogs, locale from the environment
        translator = create_translator()

        # Custom catalogs
        translator = create_translator(resource_root=Path("/custom/locales"))
    """
    settings = settings or I18nSettings()

    if resource_root is None:
        resource_root = files(settings.RESOURCE_PACKAGE).joinpath(
            settings.RESOURCE_DIRECTORY
        )

    loader = PropertiesTranslationLoader(
        resource_root=resource_root,
        encoding=settings.ENCODING,
        use_cache=settings.USE_CACHE,
    )
    translator = Translator(
        loader=loader,
        locale=locale or default_locale(settings),
        language_bundle=settings.LANGUAGE_BUNDLE,
        configuration_bundle=settings.CONFIGURATION_BUNDLE,
    )

    logger.info(
        "translator_created",
        resource_root=str(resource_root),
        locale=translator.locale.tag,
        supported_locales=translator.supported_locales(),
    )

    return translator
