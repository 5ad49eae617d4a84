# tests/conftest.py - v1
"""Shared test fixtures for unit and integration tests.

Provides a fresh FingerprintStore, a responder bound to it, and a small
static tree under tmp_path. No network, no shared process state.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from etagfiles.cache.fingerprint_store import FingerprintStore
from etagfiles.logging.context import clear_context
from etagfiles.responder.responder import FileValidationResponder


# === FIXTURES: Store and responder ===


@pytest.fixture
def store() -> FingerprintStore:
    """Empty fingerprint store, one per test."""
    return FingerprintStore()


@pytest.fixture
def responder(store: FingerprintStore) -> FileValidationResponder:
    return FileValidationResponder(store)


# === FIXTURES: Files on disk ===


@pytest.fixture
def static_root(tmp_path: Path) -> Path:
    """Small static tree:

    a.txt          "hello"
    empty.bin      zero bytes
    page.HTML      upper-case extension
    README         no extension
    assets/app.js  nested file
    """
    root = tmp_path / "static"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hello")
    (root / "empty.bin").write_bytes(b"")
    (root / "page.HTML").write_bytes(b"<h1>hi</h1>")
    (root / "README").write_bytes(b"readme")
    (root / "assets").mkdir()
    (root / "assets" / "app.js").write_bytes(b"console.log(1);")
    return root


@pytest.fixture
def sample_file(static_root: Path) -> Path:
    """The ``hello`` text file."""
    return static_root / "a.txt"


# === Logging isolation ===


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() and context changes made by a test."""
    yield
    clear_context()
    root_logger = logging.getLogger("etagfiles")
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.propagate = True
    root_logger.setLevel(logging.NOTSET)
