# src/responder/mime.py - v1
"""Static extension to MIME type table.

Built once at import from the interpreter's built-in mimetypes table (system
mime.types files are not read), then overlaid with the entries below, which
win on conflict and cover types older interpreters do not ship.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from types import MappingProxyType

_OVERRIDES = {
    # Text
    "txt": "text/plain",
    "text": "text/plain",
    "log": "text/plain",
    "md": "text/markdown",
    "csv": "text/csv",
    "tsv": "text/tab-separated-values",
    "htm": "text/html",
    "html": "text/html",
    "css": "text/css",
    "js": "text/javascript",
    "mjs": "text/javascript",
    "xml": "text/xml",
    "ics": "text/calendar",
    "vtt": "text/vtt",
    # Application
    "json": "application/json",
    "map": "application/json",
    "webmanifest": "application/manifest+json",
    "pdf": "application/pdf",
    "wasm": "application/wasm",
    "zip": "application/zip",
    "gz": "application/gzip",
    "tar": "application/x-tar",
    "7z": "application/x-7z-compressed",
    "bz2": "application/x-bzip2",
    "xz": "application/x-xz",
    "rtf": "application/rtf",
    "epub": "application/epub+zip",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xls": "application/vnd.ms-excel",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "ppt": "application/vnd.ms-powerpoint",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "bin": "application/octet-stream",
    # Images
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "avif": "image/avif",
    "bmp": "image/bmp",
    "ico": "image/x-icon",
    "svg": "image/svg+xml",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    # Fonts
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "otf": "font/otf",
    # Audio / video
    "mp3": "audio/mpeg",
    "ogg": "audio/ogg",
    "oga": "audio/ogg",
    "wav": "audio/wav",
    "flac": "audio/flac",
    "weba": "audio/webm",
    "mp4": "video/mp4",
    "m4v": "video/mp4",
    "webm": "video/webm",
    "ogv": "video/ogg",
    "mov": "video/quicktime",
    "avi": "video/x-msvideo",
    "mpeg": "video/mpeg",
    "m4a": "audio/mp4",
    "aac": "audio/aac",
    # Structured text
    "yaml": "application/yaml",
    "yml": "application/yaml",
    "jsonld": "application/ld+json",
    "xhtml": "application/xhtml+xml",
    "toml": "application/toml",
    "sh": "application/x-sh",
    # Legacy fonts and animated images
    "eot": "application/vnd.ms-fontobject",
    "apng": "image/apng",
}


def _build_table() -> dict[str, str]:
    builtin = mimetypes.MimeTypes(filenames=()).types_map[True]
    table = {ext.lstrip(".").lower(): mime for ext, mime in builtin.items()}
    table.update(_OVERRIDES)
    return table


CONTENT_TYPES = MappingProxyType(_build_table())


def content_type_for(path: str | Path) -> str | None:
    """Look up the MIME type for the file extension, case-insensitively.

    Returns None when the file has no extension or it is not in the table.
    """
    suffix = Path(path).suffix
    if not suffix:
        return None
    return CONTENT_TYPES.get(suffix[1:].lower())
