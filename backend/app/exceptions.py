"""Backend-only exception types.

These are used to keep service code HTTP-agnostic while still allowing routers
or global exception handlers to map errors to appropriate HTTP responses.
"""

from __future__ import annotations


class UploadFormError(Exception):
    """Raised when the multipart form cannot be read or carries no ``file`` part."""


class UploadWriteError(Exception):
    """Raised when an uploaded file cannot be written to the storage directory."""
