"""Template dispatch.

Maps every TemplateKind to the constructor of its template. A kind without
an entry is reported when this module is imported and rejected by
create_template().
"""

from typing import Any, Callable, Dict, List

import structlog

from grammardocs.engine.template.base import BaseTemplate
from grammardocs.engine.template.exceptions import UnknownTemplateError
from grammardocs.engine.template.html import HTMLTemplate
from grammardocs.engine.template.kinds import TemplateKind
from grammardocs.engine.template.latex import LaTeXSyntaxTemplate
from grammardocs.infrastructure.services import get_translation_service

logger = structlog.get_logger()

_TEMPLATE_FACTORIES: Dict[TemplateKind, Callable[[str], BaseTemplate]] = {
    TemplateKind.HTML: HTMLTemplate,
    TemplateKind.LATEXSYNTAX: LaTeXSyntaxTemplate,
}


def _unknown_kind(kind: Any) -> UnknownTemplateError:
    name = kind.value if isinstance(kind, TemplateKind) else kind
    return UnknownTemplateError(
        kind, get_translation_service().text(TemplateKind, "unknowntype", name)
    )


def unregistered_kinds() -> List[TemplateKind]:
    """Get the kinds that have no template constructor."""
    return [kind for kind in TemplateKind if kind not in _TEMPLATE_FACTORIES]


def validate_template_factories() -> None:
    """Check that every TemplateKind can be created.

    Raises:
        UnknownTemplateError: For the first kind without a constructor.
    """
    missing = unregistered_kinds()
    if missing:
        logger.error(
            "template_kinds_without_factory",
            kinds=[kind.value for kind in missing],
        )
        raise _unknown_kind(missing[0])


def create_template(kind: TemplateKind) -> BaseTemplate:
    """Create the template for a kind.

    Args:
        kind: Member of TemplateKind. Plain strings are not accepted; use
            TemplateKind.from_string() for user input.

    Returns:
        New template whose name is the kind's canonical name.

    Raises:
        UnknownTemplateError: If kind is not a TemplateKind or has no template.
    """
    factory = _TEMPLATE_FACTORIES.get(kind) if isinstance(kind, TemplateKind) else None
    if factory is None:
        logger.error("unknown_template_kind", kind=str(getattr(kind, "value", kind)))
        raise _unknown_kind(kind)

    template = factory(kind.value)
    logger.debug("template_created", kind=kind.value, template=repr(template))
    return template


validate_template_factories()
