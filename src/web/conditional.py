# src/web/conditional.py - v1
"""Extract the client validator from an If-None-Match header."""

from __future__ import annotations

import re
from typing import Final

_QUOTED_TAG: Final[re.Pattern[str]] = re.compile(r'^\s*(?:W/)?"([^"]*)"')


def parse_if_none_match(header: str | None) -> str | None:
    """Return the opaque tag of the first entity tag in ``header``.

    ``"ABC"`` and ``W/"ABC"`` both yield ``ABC``. Unquoted values are taken
    verbatim up to the first comma. A missing or blank header, or the ``*``
    wildcard, yields None.
    """
    if header is None:
        return None
    match = _QUOTED_TAG.match(header)
    if match:
        return match.group(1)
    first = header.split(",", 1)[0].strip()
    if first.startswith("W/"):
        first = first[2:]
    if not first or first == "*":
        return None
    return first
