"""Custom exceptions for the template system."""

from typing import Any


class TemplateError(Exception):
    """Base exception for all template-related errors."""

    pass


class UnknownTemplateError(TemplateError):
    """Raised when a template kind has no matching template.

    This is a configuration defect, not a transient condition; callers
    should not retry.

    Attributes:
        kind: The rejected kind (a TemplateKind or any other value).
    """

    def __init__(self, kind: Any, message: str = ""):
        self.kind = kind
        name = getattr(kind, "value", kind)
        super().__init__(message or f"unknown template type [{name}]")
