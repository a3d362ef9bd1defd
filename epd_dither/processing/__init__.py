"""Quantization and dithering engine for e-paper palettes."""

from .bayer import bayer_matrix, parse_bayer_size
from .buffer import PixelBuffer
from .color import ColorMapping, Palette, parse_hex, to_hex
from .dither import ClampPolicy, RandomMode, error_diffusion, ordered, quantize_only, random_dither
from .kernels import KERNELS, DiffusionEntry, DiffusionKernel, get_kernel
from .palette import (
    get_default_palette,
    get_device_colors,
    list_palettes,
    load_device_colors,
    load_palette,
    match,
    nearest_palette_index,
)
from .pipeline import (
    DitherOptions,
    ErrorDiffusion,
    Ordered,
    QuantizeOnly,
    RandomDither,
    dither_buffer,
    dither_image,
    options_from_settings,
    resolve_options,
)
from .replace import ReplacementResult, replace_colors

__all__ = [
    "bayer_matrix",
    "parse_bayer_size",
    "PixelBuffer",
    "ColorMapping",
    "Palette",
    "parse_hex",
    "to_hex",
    "ClampPolicy",
    "RandomMode",
    "error_diffusion",
    "ordered",
    "quantize_only",
    "random_dither",
    "KERNELS",
    "DiffusionEntry",
    "DiffusionKernel",
    "get_kernel",
    "get_default_palette",
    "get_device_colors",
    "list_palettes",
    "load_device_colors",
    "load_palette",
    "match",
    "nearest_palette_index",
    "DitherOptions",
    "ErrorDiffusion",
    "Ordered",
    "QuantizeOnly",
    "RandomDither",
    "dither_buffer",
    "dither_image",
    "options_from_settings",
    "resolve_options",
    "ReplacementResult",
    "replace_colors",
]
