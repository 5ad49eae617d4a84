# src/logging/context.py - v1
"""Contextual logging support: attach request_id and path to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per request by the HTTP host or the CLI.
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "path", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    path: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(request_id=_request_id.get(), path=_path.get())


def set_request_context(request_id: str, path: str | None = None) -> None:
    """Set request-level context (called once per served request)."""
    _request_id.set(request_id)
    _path.set(path)


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _path.set(None)
