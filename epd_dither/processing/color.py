from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import Iterable, Tuple

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

Color = Tuple[int, ...]

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex(text: str) -> Color:
    """Parse ``#RGB`` / ``#RRGGBB`` (``#`` optional, any case) into an RGB tuple."""

    digits = text.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or not _HEX_DIGITS.issuperset(digits):
        raise ConfigurationError(f"Invalid hex color: {text!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_hex(color: Color) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color[:3])


def _check_color(color: Iterable[int]) -> Color:
    values = tuple(int(channel) for channel in color)
    if len(values) not in (3, 4):
        raise ConfigurationError(f"Colors need 3 or 4 channels, got {values!r}")
    if any(channel < 0 or channel > 255 for channel in values):
        raise ConfigurationError(f"Color channels must be within 0-255, got {values!r}")
    return values


@dataclass(frozen=True)
class Palette:
    """Ordered set of reproducible output colors.

    Order matters: when two entries are equally close to a pixel the one
    listed first wins. Duplicates are allowed.
    """

    name: str
    colors: Tuple[Color, ...]

    def __post_init__(self) -> None:
        colors = tuple(_check_color(color) for color in self.colors)
        if not colors:
            raise ConfigurationError(f"Palette {self.name!r} has no colors")
        object.__setattr__(self, "colors", colors)

    @classmethod
    def from_hex(cls, name: str, hex_colors: Iterable[str]) -> "Palette":
        return cls(name, tuple(parse_hex(value) for value in hex_colors))

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)

    def to_hex(self) -> Tuple[str, ...]:
        return tuple(to_hex(color) for color in self.colors)


@dataclass(frozen=True)
class ColorMapping:
    """Exact-value substitution table from calibrated to device colors.

    Only indices below ``usable_length`` take part in a substitution; any
    surplus entries on the longer side are ignored.
    """

    original_colors: Tuple[Color, ...]
    device_colors: Tuple[Color, ...]

    def __post_init__(self) -> None:
        originals = tuple(_check_color(color) for color in self.original_colors)
        devices = tuple(_check_color(color) for color in self.device_colors)
        if not originals or not devices:
            raise ConfigurationError("Color mapping needs at least one color on each side")
        if len(originals) != len(devices):
            logger.warning(
                "Palette has %d colors but device color set has %d; only the first %d are replaced",
                len(originals),
                len(devices),
                min(len(originals), len(devices)),
            )
        object.__setattr__(self, "original_colors", originals)
        object.__setattr__(self, "device_colors", devices)

    @classmethod
    def from_hex(cls, original_colors: Iterable[str], device_colors: Iterable[str]) -> "ColorMapping":
        return cls(
            tuple(parse_hex(value) for value in original_colors),
            tuple(parse_hex(value) for value in device_colors),
        )

    @classmethod
    def from_palettes(cls, palette: Palette, device_colors: Palette) -> "ColorMapping":
        return cls(palette.colors, device_colors.colors)

    @property
    def usable_length(self) -> int:
        return min(len(self.original_colors), len(self.device_colors))
