"""etagfiles: static file responses with content-derived ETag validation."""

from etagfiles.version import __version__

__all__ = ["__version__"]
