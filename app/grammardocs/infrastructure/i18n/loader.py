"""Translation loading interface and implementations.

Defines the contract for loading catalogs and provides the loader for
UTF-8 encoded ``.properties`` resources.
"""

import codecs
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import structlog
from jproperties import Properties, PropertyError

from grammardocs.infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger()

PROPERTIES_SUFFIX = "properties"


class TranslationLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations define how catalogs are located and parsed. Loading
    never raises for a missing or broken catalog; it returns None instead.
    """

    @abstractmethod
    def load(
        self,
        base_name: str,
        locale: Optional[Locale] = None,
        force_reload: bool = False,
    ) -> Optional[TranslationCatalog]:
        """Load the catalog ``base_name`` for a locale.

        Args:
            base_name: Bundle base name (e.g. "language").
            locale: Locale to load, None for a locale independent catalog.
            force_reload: Bypass any cache and read the resources again.

        Returns:
            TranslationCatalog, or None if no resource could be read.
        """
        pass


class PropertiesTranslationLoader(TranslationLoader):
    """Loader for property-file catalogs.

    A catalog for ``de-DE`` is assembled from ``<base>.properties``,
    ``<base>_de.properties`` and ``<base>_de_DE.properties``, more specific
    files overriding less specific ones. Files are decoded with an explicit
    encoding (UTF-8 by default), never the platform default.

    With caching enabled, load() hands out the cached catalog itself.
    Changes made through it (e.g. ``Translator.catalog.set_message()``) are
    seen by every later cached load until a forced reload or clear_cache().

    Attributes:
        resource_root: Directory (or package Traversable) with the files.
        encoding: Character encoding of the files.
        use_cache: Whether parsed catalogs are kept in memory.
        cache: Loaded catalogs keyed by (base_name, locale).
    """

    def __init__(
        self,
        resource_root: Union[Path, Traversable],
        encoding: str = "utf-8",
        use_cache: bool = True,
    ):
        """Initialize properties loader.

        Args:
            resource_root: Directory or Traversable containing property files.
            encoding: Character encoding of the property files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If resource_root is not a directory or the encoding
                is unknown.
        """
        self.resource_root = resource_root
        self.encoding = encoding
        self.use_cache = use_cache
        self.cache: Dict[Tuple[str, Optional[Locale]], TranslationCatalog] = {}

        if not self.resource_root.is_dir():
            raise ValueError(f"Translations directory not found: {self.resource_root}")
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e

        logger.info(
            "initialized_properties_loader",
            resource_root=str(self.resource_root),
            encoding=encoding,
            use_cache=use_cache,
        )

    @staticmethod
    def bundle_names(base_name: str, locale: Optional[Locale] = None) -> List[str]:
        """Get candidate bundle names from least to most specific.

        Args:
            base_name: Bundle base name.
            locale: Locale, None for only the base bundle.

        Returns:
            E.g. ["language", "language_de", "language_de_DE"].
        """
        names = [base_name]
        if locale is not None:
            names.extend(
                f"{base_name}_{suffix}" for suffix in reversed(locale.bundle_suffixes())
            )
        return names

    def load(
        self,
        base_name: str,
        locale: Optional[Locale] = None,
        force_reload: bool = False,
    ) -> Optional[TranslationCatalog]:
        """Load a catalog from the property files of its bundle chain.

        Returns:
            TranslationCatalog, or None if no file of the chain could be read.
        """
        cache_key = (base_name, locale)
        if self.use_cache and not force_reload and cache_key in self.cache:
            return self.cache[cache_key]

        catalog = TranslationCatalog(locale=locale)
        for bundle_name in self.bundle_names(base_name, locale):
            resource_name = f"{bundle_name}.{PROPERTIES_SUFFIX}"
            messages = self._read(resource_name)
            if messages is None:
                continue
            catalog.messages.update(messages)
            catalog.sources.append(resource_name)

        if not catalog.sources:
            logger.warning(
                "catalog_unavailable",
                base_name=base_name,
                locale=locale.tag if locale else None,
                resource_root=str(self.resource_root),
            )
            return None

        catalog.loaded_at = datetime.now(timezone.utc).isoformat()
        logger.info(
            "catalog_loaded",
            base_name=base_name,
            locale=locale.tag if locale else None,
            sources=catalog.sources,
            message_count=len(catalog),
            force_reload=force_reload,
        )

        if self.use_cache:
            self.cache[cache_key] = catalog

        return catalog

    def _read(self, resource_name: str) -> Optional[Dict[str, str]]:
        """Parse one property file.

        Returns:
            Mapping of keys to messages, or None if the file is missing or broken.
        """
        resource = self.resource_root.joinpath(resource_name)
        if not resource.is_file():
            return None

        properties = Properties()
        try:
            with resource.open("rb") as stream:
                properties.load(stream, self.encoding)
        except (PropertyError, UnicodeError, LookupError, OSError) as e:
            logger.error(
                "catalog_parse_error",
                resource=resource_name,
                encoding=self.encoding,
                error=str(e),
            )
            return None

        return dict(properties.properties)

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
