"""Error diffusion kernels.

Each entry sends ``weight`` of a pixel's quantization residual to the
neighbor at ``(x + dx, y + dy)``. Every offset points at a pixel the
left-to-right raster scan has not reached yet, and the weights of each
kernel sum to 1.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Tuple


class DiffusionEntry(NamedTuple):
    dx: int
    dy: int
    weight: float


Kernel = Tuple[DiffusionEntry, ...]


class DiffusionKernel(Enum):
    FLOYD_STEINBERG = "floydSteinberg"
    FALSE_FLOYD_STEINBERG = "falseFloydSteinberg"
    JARVIS = "jarvis"
    STUCKI = "stucki"
    BURKES = "burkes"
    SIERRA3 = "sierra3"
    SIERRA2 = "sierra2"
    SIERRA2_4A = "Sierra2-4A"


def _scaled(divisor: int, *entries: Tuple[int, int, int]) -> Kernel:
    return tuple(DiffusionEntry(dx, dy, numerator / divisor) for dx, dy, numerator in entries)


#       X  7
#    3  5  1
FLOYD_STEINBERG = _scaled(16, (1, 0, 7), (-1, 1, 3), (0, 1, 5), (1, 1, 1))

#    X  3
#    3  2
FALSE_FLOYD_STEINBERG = _scaled(8, (1, 0, 3), (0, 1, 3), (1, 1, 2))

# Full 7-5-3 / 5-3-1 table; some published copies drop a cell and sum to 47/48.
JARVIS = _scaled(
    48,
    (1, 0, 7), (2, 0, 5),
    (-2, 1, 3), (-1, 1, 5), (0, 1, 7), (1, 1, 5), (2, 1, 3),
    (-2, 2, 1), (-1, 2, 3), (0, 2, 5), (1, 2, 3), (2, 2, 1),
)

STUCKI = _scaled(
    42,
    (1, 0, 8), (2, 0, 4),
    (-2, 1, 2), (-1, 1, 4), (0, 1, 8), (1, 1, 4), (2, 1, 2),
    (-2, 2, 1), (-1, 2, 2), (0, 2, 4), (1, 2, 2), (2, 2, 1),
)

BURKES = _scaled(
    32,
    (1, 0, 8), (2, 0, 4),
    (-2, 1, 2), (-1, 1, 4), (0, 1, 8), (1, 1, 4), (2, 1, 2),
)

SIERRA3 = _scaled(
    32,
    (1, 0, 5), (2, 0, 3),
    (-2, 1, 2), (-1, 1, 4), (0, 1, 5), (1, 1, 4), (2, 1, 2),
    (-1, 2, 2), (0, 2, 3), (1, 2, 2),
)

SIERRA2 = _scaled(
    16,
    (1, 0, 4), (2, 0, 3),
    (-2, 1, 1), (-1, 1, 2), (0, 1, 3), (1, 1, 2), (2, 1, 1),
)

SIERRA2_4A = _scaled(4, (1, 0, 2), (-1, 1, 1), (0, 1, 1))

KERNELS: Dict[DiffusionKernel, Kernel] = {
    DiffusionKernel.FLOYD_STEINBERG: FLOYD_STEINBERG,
    DiffusionKernel.FALSE_FLOYD_STEINBERG: FALSE_FLOYD_STEINBERG,
    DiffusionKernel.JARVIS: JARVIS,
    DiffusionKernel.STUCKI: STUCKI,
    DiffusionKernel.BURKES: BURKES,
    DiffusionKernel.SIERRA3: SIERRA3,
    DiffusionKernel.SIERRA2: SIERRA2,
    DiffusionKernel.SIERRA2_4A: SIERRA2_4A,
}


def get_kernel(kernel: DiffusionKernel) -> Kernel:
    return KERNELS[kernel]
