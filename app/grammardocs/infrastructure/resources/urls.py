"""Resolution of local files and packaged resources to URLs."""

import os
import posixpath
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Union
from urllib.parse import urlsplit, urlunsplit

import structlog

from grammardocs import PACKAGE_ROOT
from grammardocs.infrastructure.resources.exceptions import ResourceNotFoundError
from grammardocs.infrastructure.services import get_translation_service

logger = structlog.get_logger()


def _file_url(path: Union[str, Path]) -> str:
    """Absolute, normalized file URL of a path (symlinks are kept)."""
    return Path(os.path.abspath(path)).as_uri()


def _within(resource: Traversable, root: Traversable) -> bool:
    """Check that a resource does not resolve outside the root."""
    return Path(str(resource)).resolve().is_relative_to(Path(str(root)).resolve())


def resource_root_url() -> str:
    """Return the URL of the packaged resource root."""
    return _file_url(str(files(PACKAGE_ROOT)))


def concat_url(base: str, path: str) -> str:
    """Append a path to a URL and normalize ``.`` and ``..`` segments.

    Args:
        base: Base URL (e.g. "file:///opt/grammardocs/").
        path: Path appended verbatim (e.g. "html/../css/layout.css").

    Returns:
        Normalized URL.
    """
    parts = urlsplit(base + path)
    normalized = posixpath.normpath(parts.path) if parts.path else parts.path
    if parts.path.endswith("/") and not normalized.endswith("/"):
        normalized += "/"
    # posixpath keeps a leading double slash
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return urlunsplit(parts._replace(path=normalized))


def resource_url(reference: Union[str, Path]) -> str:
    """Resolve a file reference to a URL.

    An existing local file or directory wins; otherwise the reference is
    looked up relative to the packaged resources; lookups that resolve
    outside the package root are rejected.

    Args:
        reference: Local path, or path relative to the package root.

    Returns:
        Normalized URL.

    Raises:
        ResourceNotFoundError: If neither a file nor a packaged resource matches.
    """
    path = Path(reference)
    if str(reference) and path.exists():
        return _file_url(path)

    root = files(PACKAGE_ROOT)
    resource = root
    for part in str(reference).replace(os.sep, "/").split("/"):
        if part:
            resource = resource.joinpath(part)

    if (
        str(reference)
        and _within(resource, root)
        and (resource.is_file() or resource.is_dir())
    ):
        return _file_url(str(resource))

    logger.warning("resource_not_found", reference=str(reference))
    raise ResourceNotFoundError(
        reference,
        get_translation_service().text(ResourceNotFoundError, "filenotfound", reference),
    )
