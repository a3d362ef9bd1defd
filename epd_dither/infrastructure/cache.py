from __future__ import annotations

import time
from typing import Dict, Optional, Tuple

from ..config import SETTINGS


CacheEntry = Tuple[float, bytes]

MAX_ENTRIES = 16


class ResponseCache:
    """Rendered PNGs keyed by source URL and dithering options."""

    def __init__(self, ttl: Optional[float] = None, max_entries: int = MAX_ENTRIES) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._ttl = SETTINGS.cache_ttl if ttl is None else ttl
        self._max_entries = max_entries
        self._last_good: bytes = b""

    def get(self, key: str) -> Optional[bytes]:
        entry = self._entries.get(key)
        if not entry:
            return None
        timestamp, data = entry
        if time.time() - timestamp > self._ttl:
            self._entries.pop(key, None)
            return None
        return data

    def put(self, key: str, data: bytes) -> None:
        while len(self._entries) >= self._max_entries:
            oldest = min(self._entries.items(), key=lambda item: item[1][0])[0]
            self._entries.pop(oldest, None)
        self._entries[key] = (time.time(), data)
        self._last_good = data

    def last_good(self) -> Optional[bytes]:
        return self._last_good or None

    def clear(self) -> None:
        self._entries.clear()
        self._last_good = b""


CACHE = ResponseCache()
