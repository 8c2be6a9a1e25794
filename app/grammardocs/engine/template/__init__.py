"""Template selection for exports.

Example:
    from grammardocs.engine.template import TemplateKind, create_template

    template = create_template(TemplateKind.HTML)
    template.name  # "HTML"
"""

from grammardocs.engine.template.base import BaseTemplate
from grammardocs.engine.template.exceptions import TemplateError, UnknownTemplateError
from grammardocs.engine.template.factory import create_template
from grammardocs.engine.template.html import HTMLTemplate
from grammardocs.engine.template.kinds import TemplateKind
from grammardocs.engine.template.latex import LaTeXSyntaxTemplate

__all__ = [
    "BaseTemplate",
    "HTMLTemplate",
    "LaTeXSyntaxTemplate",
    "TemplateKind",
    "TemplateError",
    "UnknownTemplateError",
    "create_template",
]
