from __future__ import annotations

import random
from enum import Enum
from typing import Iterable, Optional

from .bayer import bayer_matrix
from .buffer import PixelBuffer
from .color import Palette
from .kernels import DiffusionEntry, DiffusionKernel, get_kernel
from .palette import match

# Peak-to-peak size of the ordered-dither bias, in channel units.
ORDERED_SPREAD = 256.0 / 4.0


class ClampPolicy(Enum):
    IMMEDIATE = "immediate"
    DEFERRED = "deferred"


class RandomMode(Enum):
    RGB = "rgb"
    BLACK_AND_WHITE = "blackAndWhite"


def _clamp(value: float) -> int:
    return int(min(255.0, max(0.0, value)))


def quantize_only(buffer: PixelBuffer, palette: Palette) -> PixelBuffer:
    colors = palette.colors
    for row in buffer.rows:
        for x, pixel in enumerate(row):
            row[x] = list(match(pixel, colors))
    return buffer


def error_diffusion(
    buffer: PixelBuffer,
    palette: Palette,
    kernel: DiffusionKernel | Iterable[DiffusionEntry] = DiffusionKernel.FLOYD_STEINBERG,
    serpentine: bool = False,
    clamp: ClampPolicy = ClampPolicy.IMMEDIATE,
) -> PixelBuffer:
    """Quantize ``buffer`` in place, pushing each residual onto unvisited neighbors.

    With ``serpentine`` odd rows run right to left and every kernel offset is
    mirrored horizontally on those rows. Under ``ClampPolicy.IMMEDIATE`` a
    neighbor channel is clamped to 0-255 (and truncated) as soon as error is
    added to it; ``ClampPolicy.DEFERRED`` lets neighbors drift out of range
    and leaves clamping to read-out, which reproduces older renderers.
    """

    entries = get_kernel(kernel) if isinstance(kernel, DiffusionKernel) else tuple(kernel)
    colors = palette.colors
    width, height = buffer.width, buffer.height
    rows = buffer.rows
    immediate = clamp is ClampPolicy.IMMEDIATE

    for y in range(height):
        flip = serpentine and y % 2 == 1
        x_range = range(width - 1, -1, -1) if flip else range(width)
        for x in x_range:
            old = rows[y][x]
            new = match(old, colors)
            rows[y][x] = list(new)
            error = (old[0] - new[0], old[1] - new[1], old[2] - new[2])

            for dx, dy, weight in entries:
                nx = x - dx if flip else x + dx
                ny = y + dy
                if nx < 0 or nx >= width or ny >= height:
                    continue
                neighbor = rows[ny][nx]
                for channel in range(3):
                    value = neighbor[channel] + error[channel] * weight
                    neighbor[channel] = _clamp(value) if immediate else value

    return buffer


def ordered(
    buffer: PixelBuffer,
    palette: Palette,
    width: int = 4,
    height: int = 4,
    spread: float = ORDERED_SPREAD,
) -> PixelBuffer:
    matrix = bayer_matrix(width, height)
    matrix_height = len(matrix)
    matrix_width = len(matrix[0])
    cells = float(matrix_width * matrix_height)
    # Centered so the average bias over one tile is zero.
    biases = [[((value + 0.5) / cells - 0.5) * spread for value in row] for row in matrix]
    colors = palette.colors

    for y, row in enumerate(buffer.rows):
        bias_row = biases[y % matrix_height]
        for x, pixel in enumerate(row):
            bias = bias_row[x % matrix_width]
            perturbed = [min(255.0, max(0.0, pixel[c] + bias)) for c in range(3)] + pixel[3:]
            row[x] = list(match(perturbed, colors))
    return buffer


def random_dither(
    buffer: PixelBuffer,
    palette: Palette,
    mode: RandomMode = RandomMode.RGB,
    rng: Optional[random.Random] = None,
) -> PixelBuffer:
    """Threshold every pixel against uniform noise, then snap it to the palette.

    ``RandomMode.RGB`` draws a threshold per channel; ``BLACK_AND_WHITE`` draws
    one threshold and compares it with the pixel's mean brightness. Output is
    only reproducible when the caller passes a seeded ``rng``.
    """

    rng = rng if rng is not None else random.Random()
    colors = palette.colors

    for row in buffer.rows:
        for x, pixel in enumerate(row):
            if mode is RandomMode.RGB:
                noisy = [255 if pixel[c] >= rng.randint(0, 255) else 0 for c in range(3)]
            else:
                luminosity = (int(pixel[0]) + int(pixel[1]) + int(pixel[2])) // 3
                level = 255 if luminosity >= rng.randint(0, 255) else 0
                noisy = [level, level, level]
            row[x] = list(match(noisy + pixel[3:], colors))
    return buffer
