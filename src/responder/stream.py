# src/responder/stream.py - v1
"""One-shot byte stream handed to the transport layer."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Iterator

from etagfiles.cache.fingerprint import FILE_RESPONSE_CHUNK_SIZE
from etagfiles.responder.errors import IoError

logger = logging.getLogger(__name__)


class FileByteStream:
    """Lazy, forward-only sequence of byte chunks over an open file.

    The stream owns the file handle and closes it when iteration ends for
    any reason: exhaustion, a read error, the consumer abandoning the
    iterator, an explicit ``close()`` or leaving a ``with`` block. It can be
    iterated once.
    """

    def __init__(
        self,
        handle: BinaryIO,
        path: str | Path,
        chunk_size: int = FILE_RESPONSE_CHUNK_SIZE,
    ) -> None:
        self._handle = handle
        self._path = str(path)
        self._chunk_size = chunk_size
        self._consumed = False

    @classmethod
    def open(
        cls, path: str | Path, chunk_size: int = FILE_RESPONSE_CHUNK_SIZE
    ) -> FileByteStream:
        """Open ``path`` for binary reading.

        Raises:
            IoError: If the file cannot be opened.
        """
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise IoError(f"Cannot open {path}: {exc}", path, exc) from exc
        return cls(handle, path, chunk_size)

    @property
    def path(self) -> str:
        return self._path

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __iter__(self) -> Iterator[bytes]:
        if self._consumed:
            raise RuntimeError(f"Stream over {self._path} was already consumed")
        self._consumed = True
        return self._chunks()

    def _chunks(self) -> Iterator[bytes]:
        try:
            while True:
                try:
                    chunk = self._handle.read(self._chunk_size)
                except OSError as exc:
                    raise IoError(
                        f"Read failed for {self._path}: {exc}", self._path, exc
                    ) from exc
                if not chunk:
                    return
                yield chunk
        finally:
            self.close()

    def read_all(self) -> bytes:
        """Drain the remaining stream into memory. Intended for tests and small files."""
        return b"".join(self)

    def close(self) -> None:
        """Release the file handle. Safe to call more than once."""
        if not self._handle.closed:
            self._handle.close()
            logger.debug("Closed body stream for %s", self._path)

    def __enter__(self) -> FileByteStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
