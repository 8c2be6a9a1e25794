"""Base class for export templates.

A template turns the grammar model into one kind of artifact. Rendering
itself is implemented by the concrete exporters; this module only defines
what every template exposes to the export pipeline.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from grammardocs.infrastructure.resources import output_directory
from grammardocs.infrastructure.services import get_translation_service


class BaseTemplate(ABC):
    """Abstract base class for templates.

    Attributes:
        name: Name of the template kind that created this template. Used to
            identify the template and as output path segment.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        """Get the template name."""
        return self._name

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension of the generated documents, without dot."""
        pass

    @property
    def description(self) -> str:
        """Localized description, empty if the catalog has none."""
        return get_translation_service().text(self, "description")

    def output_directory(
        self,
        base_directory: Union[str, Path],
        relative_directory: Union[str, Path],
        *extension: str,
    ) -> Path:
        """Compose the output directory of this template below a base directory."""
        return output_directory(base_directory, self, relative_directory, *extension)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
