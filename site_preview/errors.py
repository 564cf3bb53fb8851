"""Error kinds raised by the preview pipeline.

Every error aborts the run. The CLIs catch ``PreviewError`` and exit non-zero.
"""

from __future__ import annotations

from typing import Optional


class PreviewError(Exception):
    """Base class for pipeline errors."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


class ConfigurationError(PreviewError):
    """Credential missing or still set to the placeholder. Never retried."""


class ProviderError(PreviewError):
    """The generative service call failed or returned unusable content."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ValidationError(PreviewError):
    """Structured content is missing required fields."""

    def __init__(self, message: str, missing: Optional[list[str]] = None):
        self.missing = list(missing or [])
        super().__init__(message)


class FilesystemError(PreviewError):
    """A directory or file write failed."""


__all__ = [
    "PreviewError",
    "ConfigurationError",
    "ProviderError",
    "ValidationError",
    "FilesystemError",
]
