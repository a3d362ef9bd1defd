from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ..errors import ConfigurationError
from .color import Color, Palette


DEFAULT_PALETTE_NAME = "default"

PALETTES: Dict[str, Tuple[str, ...]] = {
    "default": ("#000", "#fff"),
    "spectra6": ("#191E21", "#e8e8e8", "#2157ba", "#125f20", "#b21318", "#efde44"),
    "acep": ("#191E21", "#F1F1F1", "#31318F", "#53A428", "#D20E13", "#B85E1C", "#F3CF11"),
    "gameboy": ("#0f380f", "#306230", "#8bac0f", "#9bbc0f"),
}

# What the panel controller is actually fed for each calibrated entry above.
DEVICE_COLORS: Dict[str, Tuple[str, ...]] = {
    "default": ("#e6e6e6", "#212121"),
    "spectra6": ("#000000", "#FFFFFF", "#0000FF", "#00FF00", "#FF0000", "#FFFF00"),
    "acep": ("#000000", "#FFFFFF", "#0000FF", "#00FF00", "#FF0000", "#FF8000", "#FFFF00"),
    "gameboy": ("#0f380f", "#306230", "#8bac0f", "#9bbc0f"),
}

# Palettes whose device set lines up entry for entry with the palette.
# The `default` set is the fallback for unknown names and runs light to dark.
PAIRED_PALETTES = frozenset(name for name in DEVICE_COLORS if name != DEFAULT_PALETTE_NAME)


def list_palettes() -> Tuple[str, ...]:
    return tuple(sorted(PALETTES))


def get_default_palette(name: str) -> Tuple[str, ...]:
    """Hex strings of a named palette; unknown names fall back to ``default``."""

    return PALETTES.get((name or "").lower(), PALETTES[DEFAULT_PALETTE_NAME])


def get_device_colors(name: str) -> Tuple[str, ...]:
    return DEVICE_COLORS.get((name or "").lower(), DEVICE_COLORS[DEFAULT_PALETTE_NAME])


def load_palette(name: str) -> Palette:
    key = (name or "").lower()
    if key not in PALETTES:
        raise ConfigurationError(f"Unknown palette {name!r}; choose one of {', '.join(list_palettes())}")
    return Palette.from_hex(key, PALETTES[key])


def load_device_colors(name: str) -> Palette:
    key = (name or "").lower()
    if key not in DEVICE_COLORS:
        raise ConfigurationError(f"Unknown device color set {name!r}")
    return Palette.from_hex(f"{key}-device", DEVICE_COLORS[key])


def nearest_palette_index(rgb: Sequence[float], colors: Sequence[Color]) -> int:
    """Index of the palette entry closest to ``rgb`` in RGB space.

    Equidistant entries resolve to the earliest one: the running best is
    only replaced on a strictly smaller distance.
    """

    if not colors:
        raise ConfigurationError("Cannot match against an empty palette")

    r, g, b = rgb[0], rgb[1], rgb[2]
    best_index = 0
    best_distance = float("inf")
    for index, color in enumerate(colors):
        distance = (color[0] - r) ** 2 + (color[1] - g) ** 2 + (color[2] - b) ** 2
        if distance < best_distance:
            best_distance = distance
            best_index = index
    return best_index


def match(pixel: Sequence[float], palette: Palette | Sequence[Color]) -> Color:
    """Closest palette color for ``pixel``, shaped like the pixel.

    A 4-channel pixel gets the palette entry's alpha when the entry defines
    one, otherwise it keeps its own alpha.
    """

    colors = palette.colors if isinstance(palette, Palette) else palette
    color = colors[nearest_palette_index(pixel, colors)]
    if len(pixel) < 4:
        return (color[0], color[1], color[2])
    alpha = color[3] if len(color) > 3 else int(pixel[3])
    return (color[0], color[1], color[2], alpha)
