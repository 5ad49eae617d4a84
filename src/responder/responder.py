# src/responder/responder.py - v1
"""Conditional static file responses validated by content fingerprint.

Usage:
    store = FingerprintStore()               # once per process
    responder = FileValidationResponder(store)
    response = responder.respond("/srv/a.txt", validator=client_etag)

The decision flow for each request:
  1. Canonicalise the path (NotFound / InvalidInput on failure)
  2. Fetch or compute the fingerprint through the shared store
  3. Compare with the client validator
  4. Matched: NotModifiedResponse, no stat and no open
     Changed: FullContentResponse with a fresh stat and a fresh file handle
"""

from __future__ import annotations

import logging
from pathlib import Path

from etagfiles.cache.fingerprint import FILE_RESPONSE_CHUNK_SIZE, fingerprint_file
from etagfiles.cache.fingerprint_store import FingerprintStore
from etagfiles.responder.errors import IoError
from etagfiles.responder.mime import content_type_for
from etagfiles.responder.models import (
    EtaggedFileResponse,
    FileDescriptor,
    FullContentResponse,
    NotModifiedResponse,
    evaluate,
)
from etagfiles.responder.paths import canonicalize, require_regular_file
from etagfiles.responder.stream import FileByteStream

logger = logging.getLogger(__name__)


class FileValidationResponder:
    """Builds ETag-validated responses for files on disk."""

    def __init__(
        self,
        store: FingerprintStore,
        chunk_size: int = FILE_RESPONSE_CHUNK_SIZE,
    ) -> None:
        self._store = store
        self._chunk_size = chunk_size

    @property
    def store(self) -> FingerprintStore:
        return self._store

    def respond(
        self, path: str | Path, validator: str | None = None
    ) -> EtaggedFileResponse:
        """Produce the response for ``path`` given the client's validator.

        Args:
            path: Requested file path, relative or absolute.
            validator: Opaque entity tag echoed by the client, if any.

        Returns:
            NotModifiedResponse when the validator equals the fingerprint,
            otherwise FullContentResponse owning an open body stream.

        Raises:
            NotFound: Path does not exist.
            InvalidInput: Path is not a regular file.
            IoError: Any filesystem failure while hashing, stat-ing or opening.
        """
        canonical = require_regular_file(canonicalize(path))
        fingerprint = self.fingerprint(canonical)

        if evaluate(fingerprint, validator) == "matched":
            logger.debug("ETag match for %s (%s)", canonical, fingerprint)
            return NotModifiedResponse(fingerprint=fingerprint)

        descriptor = FileDescriptor(
            path=canonical,
            fingerprint=fingerprint,
            content_type=content_type_for(canonical),
            content_length=self._content_length(canonical),
        )
        body = FileByteStream.open(canonical, self._chunk_size)
        logger.debug(
            "Serving %s",
            canonical,
            extra={
                "data": {
                    "fingerprint": fingerprint,
                    "content_type": descriptor.content_type,
                    "content_length": descriptor.content_length,
                }
            },
        )
        return FullContentResponse(descriptor=descriptor, body=body)

    def fingerprint(self, canonical: Path) -> str:
        """Cached fingerprint of an already canonical path."""
        key = str(canonical)

        def compute() -> str:
            logger.debug("Fingerprint cache miss for %s", key)
            try:
                return fingerprint_file(canonical, self._chunk_size)
            except OSError as exc:
                logger.warning("Failed to fingerprint %s: %s", key, exc)
                raise IoError(f"Cannot read {key}: {exc}", key, exc) from exc

        return self._store.get_or_compute(key, compute)

    @staticmethod
    def _content_length(canonical: Path) -> int:
        # Queried per response, never cached
        try:
            return canonical.stat().st_size
        except OSError as exc:
            logger.warning("Failed to stat %s: %s", canonical, exc)
            raise IoError(f"Cannot stat {canonical}: {exc}", canonical, exc) from exc
