"""Content pipeline error taxonomy"""

from typing import Optional


class ContentError(Exception):
    """Base class for content pipeline failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ValidationError(ContentError):
    """A document is missing a required field, has a malformed value, or sits at an invalid path.

    Raised during load; aborts the build.
    """


class ParseError(ContentError):
    """Front matter or body content could not be parsed. Aborts the build."""


class NotFoundError(ContentError):
    """A requested route has no backing document. Local to the route being rendered."""
