"""Output directory derivation.

Paths are composed syntactically; nothing here touches the filesystem.
"""

from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from grammardocs.engine.template.base import BaseTemplate


def _relative(segment: Union[str, PurePath]) -> PurePath:
    """Drop the anchor of an absolute segment so it is appended, not substituted."""
    path = PurePath(segment)
    return path.relative_to(path.anchor) if path.anchor else path


def output_directory(
    base_directory: Union[str, Path],
    template: "BaseTemplate",
    relative_directory: Union[str, Path],
    *extension: str,
) -> Path:
    """Compose the output directory of an export.

    The result is ``base_directory / template.name / relative_directory /
    extension...``. Later segments are always appended, even when they are
    absolute.

    Args:
        base_directory: Base output directory.
        template: Exporting template; its name is a path segment.
        relative_directory: Output directory below the template directory.
        *extension: Optional further segments, in order.

    Returns:
        Full path (directories are not created).

    Example:
        >>> output_directory("/out", create_template(TemplateKind.HTML), "grammar1")
        PosixPath('/out/HTML/grammar1')
    """
    segments = [template.name, relative_directory, *extension]
    return Path(base_directory, *(_relative(segment) for segment in segments))
