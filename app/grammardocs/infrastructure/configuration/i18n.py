"""Translation catalog infrastructure settings."""

import codecs
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from grammardocs.infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Settings for locating and decoding the translation catalogs.

    Environment Variables:
        I18N_LOCALE: Initial locale tag, e.g. "de" or "de_DE" (default: host locale)
        I18N_RESOURCE_PACKAGE: Package holding the catalogs (default: grammardocs)
        I18N_RESOURCE_DIRECTORY: Directory inside the package (default: locales)
        I18N_LANGUAGE_BUNDLE: Base name of the language catalogs (default: language)
        I18N_CONFIGURATION_BUNDLE: Base name of the configuration catalog
        I18N_ENCODING: Encoding of the property files (default: utf-8)
        I18N_USE_CACHE: Cache parsed catalogs in memory (default: True)

    Example:
        ```python
        from grammardocs.infrastructure.services import get_settings

        settings = get_settings()
        bundle = settings.i18n.LANGUAGE_BUNDLE
        ```
    """

    model_config = SettingsConfigDict(env_prefix="I18N_")

    LOCALE: Optional[str] = Field(
        default=None,
        description="Initial locale tag; falls back to the host locale",
    )

    RESOURCE_PACKAGE: str = Field(
        default="grammardocs",
        description="Importable package that ships the property files",
    )

    RESOURCE_DIRECTORY: str = Field(
        default="locales",
        description="Directory of the property files inside the package",
    )

    LANGUAGE_BUNDLE: str = Field(
        default="language",
        description="Base name of the per-locale language catalogs",
    )

    CONFIGURATION_BUNDLE: str = Field(
        default="configuration",
        description="Base name of the locale independent configuration catalog",
    )

    ENCODING: str = Field(
        default="utf-8",
        description="Character encoding used to decode the property files",
    )

    USE_CACHE: bool = Field(
        default=True,
        description="Cache parsed catalogs in memory",
    )

    @field_validator("ENCODING")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings unknown to the codecs registry."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v
