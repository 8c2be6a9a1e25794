"""LaTeX syntax template."""

from grammardocs.engine.template.base import BaseTemplate


class LaTeXSyntaxTemplate(BaseTemplate):
    """Exports the grammar as LaTeX syntax listing."""

    @property
    def extension(self) -> str:
        return "tex"
