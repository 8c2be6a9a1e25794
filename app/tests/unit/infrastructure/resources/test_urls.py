"""Tests for grammardocs.infrastructure.resources.urls module."""

from importlib.resources import files
from pathlib import Path

import pytest

from grammardocs.infrastructure.resources import (
    ResourceNotFoundError,
    concat_url,
    resource_root_url,
    resource_url,
)
from grammardocs.infrastructure.services import get_translation_service


@pytest.mark.unit
class TestResourceUrl:
    """Tests for resource_url()."""

    def test_existing_file(self, tmp_path):
        """An existing file resolves to its file URL."""
        path = tmp_path / "grammar.g4"
        path.write_text("grammar x;", encoding="utf-8")
        assert resource_url(str(path)) == path.as_uri()

    def test_existing_file_as_path(self, tmp_path):
        """Path objects are accepted."""
        path = tmp_path / "grammar.g4"
        path.write_text("grammar x;", encoding="utf-8")
        assert resource_url(path) == path.as_uri()

    def test_existing_file_normalized(self, tmp_path):
        """Dot segments are removed."""
        (tmp_path / "sub").mkdir()
        path = tmp_path / "grammar.g4"
        path.write_text("grammar x;", encoding="utf-8")
        assert resource_url(tmp_path / "sub" / ".." / "grammar.g4") == path.as_uri()

    def test_relative_file_is_absolute_url(self, tmp_path, monkeypatch):
        """Relative local files resolve against the working directory."""
        (tmp_path / "grammar.g4").write_text("grammar x;", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert resource_url("grammar.g4") == (tmp_path / "grammar.g4").as_uri()

    def test_packaged_resource(self):
        """Paths relative to the package resolve to the packaged file."""
        expected = Path(str(files("grammardocs").joinpath("locales", "language_en.properties")))
        url = resource_url("locales/language_en.properties")
        assert url.startswith("file:")
        assert url.endswith("/locales/language_en.properties")
        assert url == expected.absolute().as_uri()

    def test_packaged_directory(self):
        """Packaged directories resolve as well."""
        assert resource_url("locales").endswith("/locales")

    def test_not_found(self):
        """Unknown references raise ResourceNotFoundError with the path."""
        with pytest.raises(ResourceNotFoundError) as exc_info:
            resource_url("does/not/exist.xyz")

        assert exc_info.value.path == "does/not/exist.xyz"
        assert "does/not/exist.xyz" in str(exc_info.value)
        assert str(exc_info.value) == "file or resource [does/not/exist.xyz] not found"

    def test_not_found_localized(self):
        """The error message follows the active locale."""
        get_translation_service().set_locale("de")
        with pytest.raises(ResourceNotFoundError) as exc_info:
            resource_url("does/not/exist.xyz")

        assert str(exc_info.value) == (
            "Datei oder Ressource [does/not/exist.xyz] wurde nicht gefunden"
        )

    def test_packaged_lookup_stays_inside_package(self, tmp_path, monkeypatch):
        """Dot segments cannot walk out of the packaged resources."""
        package_root = tmp_path / "package"
        package_root.mkdir()
        (package_root / "inside.txt").write_text("inside", encoding="utf-8")
        (tmp_path / "secret.txt").write_text("outside", encoding="utf-8")
        working_dir = tmp_path / "work" / "deeper"
        working_dir.mkdir(parents=True)
        monkeypatch.chdir(working_dir)
        monkeypatch.setattr(
            "grammardocs.infrastructure.resources.urls.files",
            lambda package: package_root,
        )

        assert resource_url("inside.txt") == (package_root / "inside.txt").as_uri()
        with pytest.raises(ResourceNotFoundError) as exc_info:
            resource_url("../secret.txt")
        assert exc_info.value.path == "../secret.txt"

    def test_not_found_without_catalog_entry(self, monkeypatch):
        """Without catalog entry the message still names the path."""
        monkeypatch.setattr(
            get_translation_service(), "text", lambda *args, **kwargs: ""
        )
        with pytest.raises(ResourceNotFoundError) as exc_info:
            resource_url("missing.txt")
        assert "missing.txt" in str(exc_info.value)


@pytest.mark.unit
class TestUrlHelpers:
    """Tests for concat_url() and resource_root_url()."""

    def test_resource_root_url(self):
        """The root URL points at the package directory."""
        url = resource_root_url()
        assert url.startswith("file:")
        assert url.endswith("/grammardocs")

    def test_concat_url(self):
        """concat_url() appends the path verbatim."""
        assert concat_url("file:///opt/docs/", "html/index.htm") == (
            "file:///opt/docs/html/index.htm"
        )

    def test_concat_url_normalizes(self):
        """concat_url() removes dot segments."""
        assert concat_url("file:///opt/docs/", "html/../css/./layout.css") == (
            "file:///opt/docs/css/layout.css"
        )

    def test_concat_url_keeps_trailing_slash(self):
        """A trailing slash survives normalization."""
        assert concat_url("https://example.org/a/", "b/../c/") == "https://example.org/a/c/"
