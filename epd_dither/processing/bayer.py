from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from ..errors import ConfigurationError

BayerMatrix = Tuple[Tuple[int, ...], ...]

MAX_BAYER_SIZE = 8


def _subdivide(matrix: List[List[int]]) -> List[List[int]]:
    # M(2n) = [[4M, 4M + 3], [4M + 2, 4M + 1]]
    size = len(matrix)
    out = [[0] * (size * 2) for _ in range(size * 2)]
    for quadrant_y, quadrant_x, offset in ((0, 0, 0), (0, 1, 3), (1, 0, 2), (1, 1, 1)):
        for y in range(size):
            for x in range(size):
                out[quadrant_y * size + y][quadrant_x * size + x] = 4 * matrix[y][x] + offset
    return out


@lru_cache(maxsize=None)
def _square_bayer(size: int) -> BayerMatrix:
    matrix = [[0]]
    while len(matrix) < size:
        matrix = _subdivide(matrix)
    return tuple(tuple(row) for row in matrix)


def bayer_matrix(width: int, height: int) -> BayerMatrix:
    """Threshold matrix of ``height`` rows by ``width`` columns.

    Sizes above 8 are clamped to 8. Anything other than 8x8 is the top-left
    block of the 8x8 matrix with its values re-ranked so the result still
    holds each of ``0 .. width * height - 1`` exactly once.
    """

    if width < 1 or height < 1:
        raise ConfigurationError(f"Bayer matrix size must be at least 1x1, got {width}x{height}")
    width = min(width, MAX_BAYER_SIZE)
    height = min(height, MAX_BAYER_SIZE)

    big = _square_bayer(MAX_BAYER_SIZE)
    if width == MAX_BAYER_SIZE and height == MAX_BAYER_SIZE:
        return big

    block = [list(big[y][:width]) for y in range(height)]
    rank = {value: index for index, value in enumerate(sorted(v for row in block for v in row))}
    return tuple(tuple(rank[value] for value in row) for row in block)


def parse_bayer_size(text: str) -> Tuple[int, int]:
    """Parse ``"WxH"`` (or a single ``"N"`` for a square matrix)."""

    parts = text.lower().strip().split("x")
    try:
        if len(parts) == 1:
            width = height = int(parts[0])
        elif len(parts) == 2:
            width, height = int(parts[0]), int(parts[1])
        else:
            raise ValueError(text)
    except ValueError:
        raise ConfigurationError(f"Invalid Bayer size {text!r}; expected WxH, e.g. 4x4") from None
    if width < 1 or height < 1:
        raise ConfigurationError(f"Bayer matrix size must be at least 1x1, got {text!r}")
    return width, height
