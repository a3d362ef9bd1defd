"""Infrastructure helpers for networking, caching and responses."""

from .cache import CACHE, ResponseCache
from .network import FETCHER, SourceFetcher, decode_image
from .responses import encode_png, send_png

__all__ = [
    "CACHE",
    "ResponseCache",
    "FETCHER",
    "SourceFetcher",
    "decode_image",
    "encode_png",
    "send_png",
]
