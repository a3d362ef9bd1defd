from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional, Union

from PIL import Image

from ..config import SETTINGS, DitherSettings
from ..errors import ConfigurationError
from .bayer import parse_bayer_size
from .buffer import PixelBuffer
from .color import ColorMapping, Palette, parse_hex
from .dither import ClampPolicy, RandomMode, error_diffusion, ordered, quantize_only, random_dither
from .kernels import DiffusionKernel
from .palette import DEVICE_COLORS, PAIRED_PALETTES, PALETTES, load_device_colors, load_palette
from .replace import ReplacementResult, replace_colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorDiffusion:
    kernel: DiffusionKernel = DiffusionKernel.FLOYD_STEINBERG
    serpentine: bool = False
    clamp: ClampPolicy = ClampPolicy.IMMEDIATE


@dataclass(frozen=True)
class Ordered:
    width: int = 4
    height: int = 4


@dataclass(frozen=True)
class RandomDither:
    mode: RandomMode = RandomMode.RGB


@dataclass(frozen=True)
class QuantizeOnly:
    pass


DitherMode = Union[ErrorDiffusion, Ordered, RandomDither, QuantizeOnly]


@dataclass(frozen=True)
class DitherOptions:
    mode: DitherMode = field(default_factory=ErrorDiffusion)
    palette: Palette = field(default_factory=lambda: load_palette("default"))
    device_colors: Optional[Palette] = None

    @property
    def mapping(self) -> Optional[ColorMapping]:
        if self.device_colors is None:
            return None
        return ColorMapping.from_palettes(self.palette, self.device_colors)


def _key(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", (name or "").lower())


_KERNEL_NAMES = {_key(kernel.value): kernel for kernel in DiffusionKernel}
_RANDOM_NAMES = {
    "rgb": RandomMode.RGB,
    "blackandwhite": RandomMode.BLACK_AND_WHITE,
    "bw": RandomMode.BLACK_AND_WHITE,
}
_TRUE_VALUES = ("1", "true", "yes", "on")


def resolve_kernel(name: str) -> DiffusionKernel:
    try:
        return _KERNEL_NAMES[_key(name)]
    except KeyError:
        known = ", ".join(kernel.value for kernel in DiffusionKernel)
        raise ConfigurationError(f"Unknown diffusion kernel {name!r}; choose one of {known}") from None


def resolve_random_mode(name: str) -> RandomMode:
    try:
        return _RANDOM_NAMES[_key(name)]
    except KeyError:
        raise ConfigurationError(f"Unknown random dithering mode {name!r}") from None


def resolve_clamp(name: str) -> ClampPolicy:
    try:
        return ClampPolicy(name.lower())
    except ValueError:
        raise ConfigurationError(f"Unknown clamp mode {name!r}; use immediate or deferred") from None


def resolve_mode(
    mode: str,
    *,
    kernel: str = DiffusionKernel.FLOYD_STEINBERG.value,
    serpentine: bool = False,
    bayer_size: str = "4x4",
    random_mode: str = RandomMode.RGB.value,
    clamp: str = ClampPolicy.IMMEDIATE.value,
) -> DitherMode:
    """Turn selector strings into a dithering mode.

    ``mode`` is one of ``errorDiffusion``, ``ordered``/``bayer``, ``random``,
    ``quantizeOnly``/``none``, or directly a kernel name (``floyd-steinberg``)
    or ``random-rgb``/``random-bw``. Matching ignores case and punctuation.
    """

    key = _key(mode)
    if key in _KERNEL_NAMES:
        return ErrorDiffusion(_KERNEL_NAMES[key], serpentine, resolve_clamp(clamp))
    if key == "errordiffusion":
        return ErrorDiffusion(resolve_kernel(kernel), serpentine, resolve_clamp(clamp))
    if key in ("ordered", "bayer"):
        width, height = parse_bayer_size(bayer_size)
        return Ordered(width, height)
    if key == "random":
        return RandomDither(resolve_random_mode(random_mode))
    if key == "randomrgb":
        return RandomDither(RandomMode.RGB)
    if key in ("randombw", "randomblackandwhite"):
        return RandomDither(RandomMode.BLACK_AND_WHITE)
    if key in ("quantizeonly", "quantizationonly", "none"):
        return QuantizeOnly()
    raise ConfigurationError(f"Unknown dithering mode {mode!r}")


_BARE_HEX = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


def _is_hex_list(value: str, names) -> bool:
    """Comma separated colors, one ``#`` color, or one bare hex token that is not a table name."""

    text = value.strip()
    if "," in text or text.startswith("#"):
        return True
    return text.lower() not in names and _BARE_HEX.fullmatch(text) is not None


def _hex_list(name: str, text: str) -> Palette:
    return Palette(name, tuple(parse_hex(value) for value in text.split(",") if value.strip()))


def resolve_palette(value: str) -> Palette:
    """A named palette, or hex colors (comma separated, leading ``#`` optional)."""

    if _is_hex_list(value, PALETTES):
        return _hex_list("custom", value)
    return load_palette(value)


def resolve_device_colors(value: str) -> Palette:
    if _is_hex_list(value, DEVICE_COLORS):
        return _hex_list("custom-device", value)
    return load_device_colors(value)


def resolve_options(
    palette: str = "default",
    device_colors: Optional[str] = None,
    replace: bool = True,
    mode: str = "errorDiffusion",
    **mode_selectors,
) -> DitherOptions:
    resolved_palette = resolve_palette(palette)
    devices: Optional[Palette] = None
    if replace:
        if device_colors:
            devices = resolve_device_colors(device_colors)
        elif resolved_palette.name in PAIRED_PALETTES:
            devices = load_device_colors(resolved_palette.name)
    return DitherOptions(resolve_mode(mode, **mode_selectors), resolved_palette, devices)


def options_from_settings(
    settings: DitherSettings = SETTINGS,
    overrides: Optional[Mapping[str, str]] = None,
) -> DitherOptions:
    """Options from configured defaults, with string overrides (e.g. query args)."""

    overrides = overrides or {}

    def pick(name: str, default):
        value = overrides.get(name)
        return default if value is None or value == "" else value

    def pick_bool(name: str, default: bool) -> bool:
        value = overrides.get(name)
        if value is None or value == "":
            return default
        return value.strip().lower() in _TRUE_VALUES

    return resolve_options(
        palette=pick("palette", settings.palette),
        device_colors=pick("device_colors", settings.device_colors) or None,
        replace=pick_bool("replace", settings.replace_colors),
        mode=pick("mode", settings.dither_mode),
        kernel=pick("kernel", settings.kernel),
        serpentine=pick_bool("serpentine", settings.serpentine),
        bayer_size=pick("bayer", settings.bayer_size),
        random_mode=pick("random", settings.random_mode),
        clamp=pick("clamp", settings.clamp_mode),
    )


def dither_buffer(
    buffer: PixelBuffer,
    palette: Palette,
    mode: DitherMode,
    rng: Optional[random.Random] = None,
) -> PixelBuffer:
    if isinstance(mode, ErrorDiffusion):
        return error_diffusion(buffer, palette, mode.kernel, mode.serpentine, mode.clamp)
    if isinstance(mode, Ordered):
        return ordered(buffer, palette, mode.width, mode.height)
    if isinstance(mode, RandomDither):
        return random_dither(buffer, palette, mode.mode, rng)
    if isinstance(mode, QuantizeOnly):
        return quantize_only(buffer, palette)
    raise ConfigurationError(f"Unsupported dithering mode: {mode!r}")


def apply_options(
    buffer: PixelBuffer,
    options: DitherOptions,
    rng: Optional[random.Random] = None,
) -> Optional[ReplacementResult]:
    dither_buffer(buffer, options.palette, options.mode, rng)
    mapping = options.mapping
    if mapping is None:
        return None
    return replace_colors(buffer, mapping)


def dither_image(
    img: Image.Image,
    options: DitherOptions,
    rng: Optional[random.Random] = None,
) -> Image.Image:
    buffer = PixelBuffer.from_image(img)
    logger.debug(
        "Dithering %dx%d image with %s over %d colors",
        buffer.width,
        buffer.height,
        options.mode,
        len(options.palette),
    )
    apply_options(buffer, options, rng)
    return buffer.to_image()
