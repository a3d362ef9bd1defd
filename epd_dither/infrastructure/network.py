from __future__ import annotations

import io
import logging
import time
from typing import Callable

import requests
from PIL import Image, UnidentifiedImageError

from ..config import SETTINGS, DitherSettings
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], requests.Session]


def decode_image(data: bytes) -> Image.Image:
    """Open encoded image bytes with Pillow; RGBA is kept, anything else becomes RGB."""

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ConfigurationError(f"Could not decode image: {exc}") from exc
    return img if img.mode == "RGBA" else img.convert("RGB")


class SourceFetcher:
    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        settings: DitherSettings = SETTINGS,
        backoff: float = 0.4,
    ) -> None:
        self._session_factory = session_factory or requests.Session
        self._settings = settings
        self._backoff = backoff
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": "epd-dither/1.0"})
        return session

    def fetch_source(self, source_url: str | None = None) -> Image.Image:
        target_url = source_url or self._settings.source_url
        last_exception: Exception | None = None
        for attempt in range(1, self._settings.retries + 2):
            try:
                response = self._session.get(target_url, timeout=self._settings.timeout)
                response.raise_for_status()
                return decode_image(response.content)
            except (requests.RequestException, ConfigurationError) as exc:
                logger.warning("Fetching %s failed (attempt %d): %s", target_url, attempt, exc)
                last_exception = exc
                time.sleep(self._backoff * attempt)
        raise RuntimeError(f"Could not fetch {target_url}: {last_exception}")


FETCHER = SourceFetcher()
