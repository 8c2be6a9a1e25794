"""Application-scoped service providers."""

from grammardocs.infrastructure.services.providers import (
    get_settings,
    get_translation_service,
)

__all__ = [
    "get_settings",
    "get_translation_service",
]
