from fractions import Fraction

import pytest

from epd_dither.processing.kernels import KERNELS, DiffusionKernel, get_kernel


@pytest.mark.parametrize("kernel", list(DiffusionKernel))
def test_kernel_weights_sum_to_one(kernel):
    assert sum(entry.weight for entry in get_kernel(kernel)) == pytest.approx(1.0, abs=1e-12)


@pytest.mark.parametrize("kernel", list(DiffusionKernel))
def test_kernel_offsets_point_forward(kernel):
    for dx, dy, _ in get_kernel(kernel):
        assert dy > 0 or (dy == 0 and dx > 0)


def test_floyd_steinberg_table_is_exact():
    assert list(get_kernel(DiffusionKernel.FLOYD_STEINBERG)) == [
        (1, 0, 7 / 16),
        (-1, 1, 3 / 16),
        (0, 1, 5 / 16),
        (1, 1, 1 / 16),
    ]


def test_jarvis_uses_the_complete_table():
    weights = [Fraction(entry.weight).limit_denominator(48) for entry in get_kernel(DiffusionKernel.JARVIS)]

    assert sum(weights) == 1
    assert {dy for _, dy, _ in get_kernel(DiffusionKernel.JARVIS)} == {0, 1, 2}


@pytest.mark.parametrize(
    "kernel, neighbors, rows",
    [
        (DiffusionKernel.FLOYD_STEINBERG, 4, 1),
        (DiffusionKernel.FALSE_FLOYD_STEINBERG, 3, 1),
        (DiffusionKernel.JARVIS, 12, 2),
        (DiffusionKernel.STUCKI, 12, 2),
        (DiffusionKernel.BURKES, 7, 1),
        (DiffusionKernel.SIERRA3, 10, 2),
        (DiffusionKernel.SIERRA2, 7, 1),
        (DiffusionKernel.SIERRA2_4A, 3, 1),
    ],
)
def test_kernel_shapes(kernel, neighbors, rows):
    entries = KERNELS[kernel]

    assert len(entries) == neighbors
    assert max(dy for _, dy, _ in entries) == rows


def test_false_floyd_steinberg_table():
    assert list(get_kernel(DiffusionKernel.FALSE_FLOYD_STEINBERG)) == [
        (1, 0, 3 / 8),
        (0, 1, 3 / 8),
        (1, 1, 2 / 8),
    ]
