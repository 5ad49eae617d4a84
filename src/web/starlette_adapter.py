# src/web/starlette_adapter.py - v1
"""Starlette transport for FileValidationResponder.

Usage:
    app = create_app(load_settings(static_root="./public"))

The app holds one FingerprintStore for its lifetime (``app.state``) and
serves every GET under the configured root. Responder failures map to
404 / 400 / 500; everything else about routing stays with Starlette.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import AsyncIterator

from starlette.applications import Starlette
from starlette.background import BackgroundTask
from starlette.concurrency import iterate_in_threadpool, run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response, StreamingResponse
from starlette.routing import Route

from etagfiles.cache.fingerprint_store import FingerprintStore
from etagfiles.config.settings import Settings
from etagfiles.web.conditional import parse_if_none_match
from etagfiles.logging.context import clear_context, set_request_context
from etagfiles.responder.errors import FileResponseError, NotFound
from etagfiles.responder.models import EtaggedFileResponse, NotModifiedResponse
from etagfiles.responder.paths import canonicalize
from etagfiles.responder.responder import FileValidationResponder
from etagfiles.responder.stream import FileByteStream

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    "not_found": 404,
    "invalid_input": 400,
    "io_error": 500,
}


async def _iterate_body(stream: FileByteStream) -> AsyncIterator[bytes]:
    try:
        async for chunk in iterate_in_threadpool(iter(stream)):
            yield chunk
    finally:
        stream.close()


def to_starlette_response(response: EtaggedFileResponse) -> Response:
    """Convert a responder decision into a Starlette response.

    Not-modified responses carry only the 304 status. Full responses stream
    the body in the stream's chunk size; the handle is closed when the
    stream ends, when the transport abandons it, or after the response.
    """
    if isinstance(response, NotModifiedResponse):
        return Response(status_code=response.status_code)

    return StreamingResponse(
        _iterate_body(response.body),
        status_code=response.status_code,
        headers=response.headers(),
        background=BackgroundTask(response.close),
    )


class EtaggedFileEndpoint:
    """Serves files below ``root`` through a shared responder."""

    def __init__(self, root: Path, responder: FileValidationResponder) -> None:
        self._root = root.expanduser().resolve()
        self._responder = responder

    @property
    def root(self) -> Path:
        return self._root

    def resolve_request_path(self, url_path: str) -> Path:
        """Map a URL path to a canonical file path inside the root.

        Raises:
            NotFound: For ``..`` segments, missing files, or targets that
                resolve outside the root (e.g. through a symlink).
        """
        parts = [part for part in url_path.split("/") if part not in ("", ".")]
        if any(part == ".." for part in parts):
            raise NotFound(f"Path traversal is blocked: {url_path}", url_path)
        canonical = canonicalize(self._root.joinpath(*parts))
        if not canonical.is_relative_to(self._root):
            raise NotFound(f"Path escapes static root: {url_path}", url_path)
        return canonical

    def respond(self, url_path: str, if_none_match: str | None) -> EtaggedFileResponse:
        """Blocking part of the request: resolve, fingerprint, decide."""
        canonical = self.resolve_request_path(url_path)
        return self._responder.respond(canonical, parse_if_none_match(if_none_match))

    async def get(self, request: Request) -> Response:
        url_path = request.path_params.get("path", "")
        set_request_context(uuid.uuid4().hex[:12], url_path)
        try:
            response = await run_in_threadpool(
                self.respond, url_path, request.headers.get("if-none-match")
            )
        except FileResponseError as exc:
            status = STATUS_BY_KIND.get(exc.kind, 500)
            if status >= 500:
                logger.error("Failed to serve %s: %s", url_path, exc)
            else:
                logger.info("Rejected %s (%s): %s", url_path, status, exc)
            return PlainTextResponse(exc.kind, status_code=status)
        finally:
            clear_context()

        return to_starlette_response(response)


def create_app(
    settings: Settings, store: FingerprintStore | None = None
) -> Starlette:
    """Build a Starlette app serving ``settings.static_root``.

    Args:
        settings: Application settings (static root, chunk size).
        store: Fingerprint cache to share; a new one is created if omitted.

    Returns:
        Starlette application with a single catch-all GET route.
    """
    store = store if store is not None else FingerprintStore()
    responder = FileValidationResponder(store, chunk_size=settings.chunk_size)
    endpoint = EtaggedFileEndpoint(settings.resolved_static_root, responder)

    app = Starlette(
        routes=[Route("/{path:path}", endpoint=endpoint.get, methods=["GET"])],
    )
    app.state.fingerprint_store = store
    app.state.file_endpoint = endpoint
    logger.info("Serving static files from %s", endpoint.root)
    return app
