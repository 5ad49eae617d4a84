# src/responder/models.py - v1
"""Per-request descriptors and the two response shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Union

from etagfiles.responder.stream import FileByteStream

ValidationOutcome = Literal["matched", "changed"]


def evaluate(fingerprint: str, validator: str | None) -> ValidationOutcome:
    """Compare a client validator with the current fingerprint.

    Exact string equality; a missing validator never matches.
    """
    if validator is not None and validator == fingerprint:
        return "matched"
    return "changed"


def strong_etag(fingerprint: str) -> str:
    """Format a fingerprint as a strong entity tag header value."""
    return f'"{fingerprint}"'


@dataclass
class FileDescriptor:
    """What the responder learned about one requested file."""

    path: Path
    fingerprint: str
    content_type: str | None = None
    content_length: int | None = None


@dataclass
class NotModifiedResponse:
    """The client's cached copy is current: status only, no body or headers."""

    fingerprint: str
    status_code: int = 304
    outcome: ValidationOutcome = "matched"
    body: None = None

    @property
    def is_etag_match(self) -> bool:
        return True

    def headers(self) -> dict[str, str]:
        return {}


@dataclass
class FullContentResponse:
    """Full body plus validator and content metadata."""

    descriptor: FileDescriptor
    body: FileByteStream = field(repr=False)
    status_code: int = 200
    outcome: ValidationOutcome = "changed"

    @property
    def is_etag_match(self) -> bool:
        return False

    @property
    def fingerprint(self) -> str:
        return self.descriptor.fingerprint

    def headers(self) -> dict[str, str]:
        """ETag always; Content-Type and Content-Length when known."""
        headers = {"ETag": strong_etag(self.descriptor.fingerprint)}
        if self.descriptor.content_type is not None:
            headers["Content-Type"] = self.descriptor.content_type
        if self.descriptor.content_length is not None:
            headers["Content-Length"] = str(self.descriptor.content_length)
        return headers

    def close(self) -> None:
        self.body.close()


EtaggedFileResponse = Union[NotModifiedResponse, FullContentResponse]
