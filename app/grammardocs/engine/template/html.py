"""HTML template."""

from grammardocs.engine.template.base import BaseTemplate


class HTMLTemplate(BaseTemplate):
    """Exports railroad diagrams as HTML pages."""

    @property
    def extension(self) -> str:
        return "htm"
