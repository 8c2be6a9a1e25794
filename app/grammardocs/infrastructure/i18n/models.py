"""Translation models for i18n system.

Defines core data structures for managing translations and locales.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from grammardocs import PACKAGE_ROOT

_LANGUAGE_PATTERN = re.compile(r"^[a-z]{2,8}$")
_UNSAFE_KEY_CHARACTERS = re.compile(r"[^a-zA-Z0-9_.]+")


@dataclass(frozen=True)
class Locale:
    """Locale identifier made of a language and an optional region.

    Accepts tags in IETF (``de-DE``) or POSIX (``de_DE.UTF-8``) spelling.

    Attributes:
        language: Lowercase language code (e.g. "de").
        region: Uppercase region code (e.g. "DE"), empty if absent.
    """

    language: str
    region: str = ""

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale.

        Args:
            locale_str: Locale string (e.g., "en", "de-DE", "de_DE.UTF-8").

        Returns:
            Matching Locale.

        Raises:
            ValueError: If the string has no valid language code.
        """
        tag = locale_str.strip().split(".")[0].split("@")[0].replace("_", "-")
        parts = tag.split("-")
        language = parts[0].lower()
        if not _LANGUAGE_PATTERN.match(language):
            raise ValueError(f"Unsupported locale: {locale_str}")
        region = parts[1].upper() if len(parts) > 1 else ""
        return cls(language=language, region=region)

    @property
    def tag(self) -> str:
        """Get the IETF tag (e.g. "de-DE" or "en")."""
        return f"{self.language}-{self.region}" if self.region else self.language

    def bundle_suffixes(self) -> List[str]:
        """Get bundle name suffixes, most specific first.

        Returns:
            E.g. ["de_DE", "de"] for de-DE, ["en"] for en.
        """
        if self.region:
            return [f"{self.language}_{self.region}", self.language]
        return [self.language]

    def __str__(self) -> str:
        return self.tag


def qualified_name(cls: type) -> str:
    """Return the dotted module path and qualified name of a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True)
class TranslationKey:
    """Lookup key of a translated message.

    A key is derived from a type and a label. Its string form is lowercase,
    contains only ``[a-z0-9_.]`` and has the package root prefix removed,
    so ``grammardocs.engine.template.kinds.TemplateKind`` with label
    ``unknownType`` becomes ``engine.template.kinds.templatekind.unknowntype``.

    Distinct inputs that differ only in case or in stripped characters map
    to the same key.

    Attributes:
        namespace: Qualified type name (e.g. "grammardocs.engine.template.kinds.TemplateKind").
        label: Message label chosen by the caller (e.g. "unknowntype").
    """

    namespace: str
    label: str

    @classmethod
    def for_source(cls, source: Any, label: str) -> "TranslationKey":
        """Create a key for a class or for the runtime type of an object.

        Args:
            source: A class, or any object whose most-derived type is used.
            label: Message label.

        Returns:
            TranslationKey instance.
        """
        source_type = source if isinstance(source, type) else type(source)
        return cls(namespace=qualified_name(source_type), label=label)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dotted ``type.label`` string.

        Args:
            key_string: Dotted key (e.g., "mytype.greeting").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        namespace, separator, label = key_string.rpartition(".")
        if not separator:
            raise ValueError(
                f"Translation key must be in format 'type.label': {key_string}"
            )
        return cls(namespace=namespace, label=label)

    @property
    def value(self) -> str:
        """Normalized catalog key."""
        key = _UNSAFE_KEY_CHARACTERS.sub(
            "", f"{self.namespace.lower()}.{self.label.lower()}"
        )
        prefix = f"{PACKAGE_ROOT}."
        if key.startswith(prefix):
            return key[len(prefix) :]
        return key

    def __str__(self) -> str:
        return self.value


@dataclass
class TranslationCatalog:
    """Container for the messages of one catalog.

    Language catalogs are bound to a locale; the configuration catalog has
    no locale.

    Attributes:
        locale: The Locale this catalog is for, None if locale independent.
        messages: Flat dict {key: message_string}.
        sources: Names of the resources merged into this catalog.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    locale: Optional[Locale] = None
    messages: Dict[str, str] = field(default_factory=dict)
    sources: List[str] = field(default_factory=list)
    loaded_at: Optional[str] = None

    def get_message(self, key: Union[TranslationKey, str]) -> Optional[str]:
        """Retrieve a message by key.

        Args:
            key: TranslationKey or already normalized key string.

        Returns:
            Message string, or None if not found.
        """
        return self.messages.get(str(key))

    def set_message(self, key: Union[TranslationKey, str], message: str) -> None:
        """Set a message."""
        self.messages[str(key)] = message

    def has_message(self, key: Union[TranslationKey, str]) -> bool:
        """Check if a message exists for given key."""
        return str(key) in self.messages

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Entries of ``other`` override existing ones.
        """
        self.messages.update(other.messages)
        self.sources.extend(other.sources)

    def __len__(self) -> int:
        return len(self.messages)
