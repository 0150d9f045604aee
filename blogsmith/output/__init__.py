"""Output subsystem: writes the rendered site to disk."""

from blogsmith.output.writer import SiteWriter

__all__ = [
    "SiteWriter",
]
