"""grammardocs configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from grammardocs.infrastructure.configuration.i18n import I18nSettings


class Settings(BaseSettings):
    """grammardocs configuration settings - main aggregator.

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        LOG_JSON: Render log events as JSON instead of console output

    Example:
        ```python
        from grammardocs.infrastructure.services import get_settings

        settings = get_settings()

        encoding = settings.i18n.ENCODING
        if settings.is_production:
            # JSON logging...
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if log output is meant for machines.

        Returns:
            True if LOG_JSON is set, False otherwise.
        """
        return self.LOG_JSON

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
