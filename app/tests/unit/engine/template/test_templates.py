"""Tests for grammardocs.engine.template package."""

import pytest

from grammardocs.engine.template import (
    BaseTemplate,
    HTMLTemplate,
    LaTeXSyntaxTemplate,
    TemplateKind,
    UnknownTemplateError,
    create_template,
)
from grammardocs.engine.template import factory
from grammardocs.infrastructure.services import get_translation_service


@pytest.mark.unit
class TestTemplateKind:
    """Tests for TemplateKind enum."""

    def test_kind_values(self):
        """Kinds carry their canonical names."""
        assert TemplateKind.HTML.value == "HTML"
        assert TemplateKind.LATEXSYNTAX.value == "LATEXSYNTAX"
        assert len(TemplateKind) == 2

    @pytest.mark.parametrize(
        "name,kind",
        [
            ("HTML", TemplateKind.HTML),
            ("html", TemplateKind.HTML),
            (" LaTeXSyntax ", TemplateKind.LATEXSYNTAX),
        ],
    )
    def test_from_string(self, name, kind):
        """from_string() ignores case and surrounding blanks."""
        assert TemplateKind.from_string(name) is kind

    def test_from_string_unknown(self):
        """from_string() raises UnknownTemplateError with a localized message."""
        with pytest.raises(UnknownTemplateError) as exc_info:
            TemplateKind.from_string("pdf")

        assert exc_info.value.kind == "pdf"
        assert str(exc_info.value) == "unknown template type [pdf]"

    def test_generate(self):
        """generate() creates a template of the kind."""
        template = TemplateKind.LATEXSYNTAX.generate()
        assert isinstance(template, LaTeXSyntaxTemplate)
        assert template.name == "LATEXSYNTAX"


@pytest.mark.unit
class TestCreateTemplate:
    """Tests for create_template() dispatch."""

    @pytest.mark.parametrize("kind", list(TemplateKind))
    def test_name_matches_kind(self, kind):
        """Every kind creates a template named after it."""
        template = create_template(kind)
        assert isinstance(template, BaseTemplate)
        assert template.name == kind.value

    def test_concrete_types(self):
        """Each kind maps to its template class."""
        assert isinstance(create_template(TemplateKind.HTML), HTMLTemplate)
        assert isinstance(create_template(TemplateKind.LATEXSYNTAX), LaTeXSyntaxTemplate)

    def test_new_instance_per_call(self):
        """Every call creates a new template."""
        assert create_template(TemplateKind.HTML) is not create_template(TemplateKind.HTML)

    def test_extensions(self):
        """Templates expose the extension of their documents."""
        assert create_template(TemplateKind.HTML).extension == "htm"
        assert create_template(TemplateKind.LATEXSYNTAX).extension == "tex"

    @pytest.mark.parametrize("kind", ["HTML", None, 1, object()])
    def test_rejects_non_kinds(self, kind):
        """Values outside TemplateKind are rejected."""
        with pytest.raises(UnknownTemplateError) as exc_info:
            create_template(kind)
        assert exc_info.value.kind is kind

    def test_kind_without_factory(self, monkeypatch):
        """A kind missing from the dispatch table is rejected."""
        monkeypatch.delitem(factory._TEMPLATE_FACTORIES, TemplateKind.HTML)

        with pytest.raises(UnknownTemplateError) as exc_info:
            create_template(TemplateKind.HTML)

        assert exc_info.value.kind is TemplateKind.HTML
        assert str(exc_info.value) == "unknown template type [HTML]"

    def test_kind_without_factory_localized(self, monkeypatch):
        """The error message follows the active locale."""
        monkeypatch.delitem(factory._TEMPLATE_FACTORIES, TemplateKind.LATEXSYNTAX)
        get_translation_service().set_locale("de")

        with pytest.raises(UnknownTemplateError) as exc_info:
            create_template(TemplateKind.LATEXSYNTAX)

        assert str(exc_info.value) == "unbekannter Vorlagentyp [LATEXSYNTAX]"

    def test_validate_template_factories(self, monkeypatch):
        """validate_template_factories() reports incomplete tables."""
        factory.validate_template_factories()
        assert factory.unregistered_kinds() == []

        monkeypatch.delitem(factory._TEMPLATE_FACTORIES, TemplateKind.LATEXSYNTAX)
        assert factory.unregistered_kinds() == [TemplateKind.LATEXSYNTAX]
        with pytest.raises(UnknownTemplateError):
            factory.validate_template_factories()


@pytest.mark.unit
class TestTemplateDescription:
    """Tests for localized template descriptions."""

    def test_english(self):
        """Descriptions come from the active catalog."""
        assert create_template(TemplateKind.HTML).description == (
            "railroad diagrams as HTML pages"
        )

    def test_german(self):
        """Descriptions follow the locale switch."""
        get_translation_service().set_locale("de")
        assert create_template(TemplateKind.LATEXSYNTAX).description == (
            "Grammatik als LaTeX-Syntaxübersicht"
        )

    def test_repr(self):
        """repr() names class and template name."""
        assert repr(create_template(TemplateKind.HTML)) == "HTMLTemplate(name='HTML')"
