"""Field encoders registered on the default registry when imported."""

from . import extensions, itunes, media, rss

__all__ = ["extensions", "itunes", "media", "rss"]
