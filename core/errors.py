"""Error types raised by gnav components."""

from __future__ import annotations


class GnavError(Exception):
    """Base class for every error gnav surfaces to the user."""


class InvalidArgumentError(GnavError):
    """User-supplied index or count is out of range."""


class InvalidIndexError(InvalidArgumentError):
    """Workspace index below 1."""


class ParseError(GnavError):
    """Malformed configuration document or names file."""


class ExternalToolError(GnavError):
    """A system utility is missing, failed, or answered with garbage."""

    def __init__(self, message: str, command: list[str] | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.command = list(command or [])
        self.stderr = stderr


class FormatError(GnavError):
    """Selection line does not look like ``index: label``."""


class NotFoundError(GnavError):
    """No active workspace reported by the window manager."""


class StoreIOError(GnavError):
    """Names file could not be read or written."""
