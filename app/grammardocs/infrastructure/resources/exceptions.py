"""Custom exceptions for resource resolution."""

from pathlib import Path
from typing import Union


class ResourceError(Exception):
    """Base exception for all resource-related errors."""

    pass


class ResourceNotFoundError(ResourceError):
    """Raised when neither a local file nor a packaged resource matches a path.

    Example:
        >>> resource_url("does/not/exist.xyz")
        Traceback (most recent call last):
        ...
        ResourceNotFoundError: file or resource [does/not/exist.xyz] not found

    Attributes:
        path: The requested path as given by the caller.
    """

    def __init__(self, path: Union[str, Path], message: str = ""):
        self.path = str(path)
        super().__init__(message or f"file or resource [{self.path}] not found")
