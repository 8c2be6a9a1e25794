"""Closed set of template kinds."""

from enum import Enum
from typing import TYPE_CHECKING

from grammardocs.engine.template.exceptions import UnknownTemplateError
from grammardocs.infrastructure.services import get_translation_service

if TYPE_CHECKING:
    from grammardocs.engine.template.base import BaseTemplate


class TemplateKind(str, Enum):
    """Template kinds available for exports.

    The value is the canonical name; it identifies the created template and
    is used as output path segment.
    """

    HTML = "HTML"
    LATEXSYNTAX = "LATEXSYNTAX"

    @classmethod
    def from_string(cls, name: str) -> "TemplateKind":
        """Convert a kind name to TemplateKind, ignoring case.

        Args:
            name: Kind name (e.g. "html", "LaTeXSyntax").

        Returns:
            Matching TemplateKind.

        Raises:
            UnknownTemplateError: If no kind has this name.
        """
        try:
            return cls(name.strip().upper())
        except ValueError as e:
            raise UnknownTemplateError(
                name, get_translation_service().text(cls, "unknowntype", name)
            ) from e

    def generate(self) -> "BaseTemplate":
        """Create a new template of this kind."""
        # factory imports this module
        from grammardocs.engine.template.factory import create_template

        return create_template(self)
