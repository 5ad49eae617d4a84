# src/responder/errors.py - v1
"""Failures raised by FileValidationResponder.

Callers distinguish failures by exception type (or ``kind``). HTTP status
mapping belongs to the transport layer, see etagfiles.web.starlette_adapter.
"""

from __future__ import annotations

from pathlib import Path


class FileResponseError(Exception):
    """Base class for responder failures."""

    kind = "error"

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = str(path)


class NotFound(FileResponseError):
    """The requested path does not exist or cannot be resolved."""

    kind = "not_found"


class InvalidInput(FileResponseError):
    """The path exists but is not a regular file."""

    kind = "invalid_input"


class IoError(FileResponseError):
    """Opening, reading or stat-ing the file failed."""

    kind = "io_error"

    def __init__(self, message: str, path: str | Path, os_error: OSError) -> None:
        super().__init__(message, path)
        self.os_error = os_error
