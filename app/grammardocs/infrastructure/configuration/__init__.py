"""Infrastructure configuration module - public API.

Centralized configuration for grammardocs using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation catalog settings class

Example:
    ```python
    from grammardocs.infrastructure.services import get_settings

    settings = get_settings()
    bundle = settings.i18n.LANGUAGE_BUNDLE
    ```
"""

from grammardocs.infrastructure.configuration.i18n import I18nSettings
from grammardocs.infrastructure.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
