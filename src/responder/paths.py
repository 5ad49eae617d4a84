# src/responder/paths.py - v1
"""Canonicalisation of requested file paths."""

from __future__ import annotations

import errno
from pathlib import Path

from etagfiles.responder.errors import InvalidInput, IoError, NotFound


def canonicalize(path: str | Path) -> Path:
    """Resolve symlinks and ``.``/``..`` segments to an absolute path.

    Raises:
        NotFound: If the path (or a symlink target) does not exist.
        InvalidInput: If the path cannot name a file (embedded NUL byte).
        IoError: For other resolution failures (permissions, symlink loops).
    """
    try:
        return Path(path).resolve(strict=True)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFound(f"No such file: {path}", path) from exc
    except OSError as exc:
        raise IoError(f"Cannot resolve {path}: {exc}", path, exc) from exc
    except ValueError as exc:
        raise InvalidInput(f"Invalid path: {path!r}", path) from exc
    except RuntimeError as exc:
        # Python < 3.13 reports symlink loops as RuntimeError
        loop = OSError(errno.ELOOP, str(exc), str(path))
        raise IoError(f"Cannot resolve {path}: {exc}", path, loop) from exc


def require_regular_file(path: Path) -> Path:
    """Return ``path`` unchanged if it is a regular file.

    Raises:
        InvalidInput: If the target is a directory, fifo, socket, etc.
        IoError: If the file type cannot be determined.
    """
    try:
        is_file = path.is_file()
    except OSError as exc:
        raise IoError(f"Cannot stat {path}: {exc}", path, exc) from exc
    if not is_file:
        raise InvalidInput(f"Not a regular file: {path}", path)
    return path
