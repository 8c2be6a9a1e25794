"""Output paths and resource URLs.

Public API:
    - output_directory(): Output location of an export
    - resource_url(): URL of a local file or packaged resource
    - resource_root_url(): URL of the packaged resource root
    - concat_url(): Append a path to a URL
    - ResourceNotFoundError: Raised by resource_url()
"""

from grammardocs.infrastructure.resources.exceptions import (
    ResourceError,
    ResourceNotFoundError,
)
from grammardocs.infrastructure.resources.paths import output_directory
from grammardocs.infrastructure.resources.urls import (
    concat_url,
    resource_root_url,
    resource_url,
)

__all__ = [
    "ResourceError",
    "ResourceNotFoundError",
    "output_directory",
    "resource_url",
    "resource_root_url",
    "concat_url",
]
