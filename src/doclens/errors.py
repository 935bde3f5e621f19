"""Error kinds raised by the DocLens engine."""

from __future__ import annotations


class DocLensError(Exception):
    """Base class for every failure surfaced to callers."""


class ValidationError(DocLensError):
    """Input was rejected before touching storage."""


class SecurityError(ValidationError):
    """Filename looks like a traversal or absolute-path attempt."""


class NotFoundError(DocLensError):
    """Referenced document or storage directory does not exist."""


class ParseError(DocLensError):
    """Document bytes do not have the expected structure."""


class ExtractionError(DocLensError):
    """Text extraction failed on a paginated document."""
