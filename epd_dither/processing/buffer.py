from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from PIL import Image

from ..errors import ConfigurationError

Pixel = List[float]


class PixelBuffer:
    """Row-major grid of mutable pixels, the unit every engine mutates.

    Each pixel is a list of 3 (RGB) or 4 (RGBA) channel values. Channels are
    ints in [0, 255] except while a deferred-clamp diffusion pass is running,
    when they may hold out-of-range floats until ``to_image`` clamps them.
    """

    def __init__(self, width: int, height: int, rows: List[List[Pixel]], channels: int = 3) -> None:
        if channels not in (3, 4):
            raise ConfigurationError(f"Pixel buffers hold 3 or 4 channels, not {channels}")
        self.width = width
        self.height = height
        self.channels = channels
        self.rows = rows

    @classmethod
    def from_pixels(cls, pixels: Sequence[Sequence[Sequence[int]]]) -> "PixelBuffer":
        """Build from nested rows of color tuples: ``pixels[y][x] == (r, g, b[, a])``."""

        rows = [[list(pixel) for pixel in row] for row in pixels]
        height = len(rows)
        width = len(rows[0]) if rows else 0
        channels = len(rows[0][0]) if width else 3
        for row in rows:
            if len(row) != width or any(len(pixel) != channels for pixel in row):
                raise ConfigurationError("Pixel rows must share one width and channel count")
        return cls(width, height, rows, channels)

    @classmethod
    def filled(cls, width: int, height: int, color: Sequence[int]) -> "PixelBuffer":
        return cls(width, height, [[list(color) for _ in range(width)] for _ in range(height)], len(color))

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelBuffer":
        mode = "RGBA" if img.mode == "RGBA" else "RGB"
        src = img.convert(mode)
        width, height = src.size
        pixels = src.load()
        rows = [[list(pixels[x, y]) for x in range(width)] for y in range(height)]
        return cls(width, height, rows, len(mode))

    def to_image(self) -> Image.Image:
        mode = "RGBA" if self.channels == 4 else "RGB"
        out = Image.new(mode, (self.width, self.height))
        out_pixels = out.load()
        for y, row in enumerate(self.rows):
            for x, pixel in enumerate(row):
                out_pixels[x, y] = tuple(int(min(255.0, max(0.0, channel))) for channel in pixel)
        return out

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, [[list(p) for p in row] for row in self.rows], self.channels)

    def __getitem__(self, position: Tuple[int, int]) -> Pixel:
        x, y = position
        return self.rows[y][x]

    def __setitem__(self, position: Tuple[int, int], color: Iterable[float]) -> None:
        x, y = position
        self.rows[y][x] = list(color)

    def colors(self) -> Iterator[Tuple[int, ...]]:
        """Yield every pixel as a tuple, row by row."""
        for row in self.rows:
            for pixel in row:
                yield tuple(pixel)

    def to_pixels(self) -> List[List[Tuple[int, ...]]]:
        return [[tuple(pixel) for pixel in row] for row in self.rows]
