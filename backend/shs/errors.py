"""Typed outcomes of a failed directory-index build.

The core never produces HTTP statuses; routes map these onto responses.
"""

from __future__ import annotations


class ListingError(Exception):
    """Base class for directory-index failures."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class DecodingError(ListingError):
    """A path segment is not valid percent-encoded UTF-8."""


class PathEscape(ListingError):
    """A path would resolve outside the served root."""


class NotFound(ListingError):
    """The target path does not exist."""


class NotADirectory(ListingError):
    """The target path exists but is not a directory."""


class PermissionDenied(ListingError):
    """The filesystem refused listing or metadata access."""
