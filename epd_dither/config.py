import logging
import os
from dataclasses import dataclass

from .errors import ConfigurationError


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _env_bool(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class DitherSettings:
    source_url: str
    port: int
    palette: str
    device_colors: str
    dither_mode: str
    kernel: str
    serpentine: bool
    bayer_size: str
    random_mode: str
    clamp_mode: str
    replace_colors: bool
    timeout: float
    retries: int
    cache_ttl: float
    log_level: str

    @classmethod
    def from_env(cls) -> "DitherSettings":
        return cls(
            source_url=os.getenv("SOURCE_URL", "http://127.0.0.1:10000/image.png"),
            port=int(os.getenv("PORT", "5500")),
            palette=os.getenv("PALETTE", "spectra6").lower(),
            device_colors=os.getenv("DEVICE_COLORS", "").lower(),
            dither_mode=os.getenv("DITHER_MODE", "errorDiffusion"),
            kernel=os.getenv("KERNEL", "floydSteinberg"),
            serpentine=_env_bool("SERPENTINE", "false"),
            bayer_size=os.getenv("BAYER_SIZE", "4x4"),
            random_mode=os.getenv("RANDOM_MODE", "rgb"),
            clamp_mode=os.getenv("CLAMP_MODE", "immediate").lower(),
            replace_colors=_env_bool("REPLACE_COLORS", "true"),
            timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            retries=int(os.getenv("SOURCE_RETRIES", "2")),
            cache_ttl=float(os.getenv("CACHE_TTL", "5")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


SETTINGS = DitherSettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("epd-dither")
