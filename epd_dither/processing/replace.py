from __future__ import annotations

import logging
from dataclasses import dataclass

from .buffer import PixelBuffer
from .color import ColorMapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplacementResult:
    replaced: int
    mismatched: int

    @property
    def ok(self) -> bool:
        return self.mismatched == 0


def replace_colors(buffer: PixelBuffer, mapping: ColorMapping) -> ReplacementResult:
    """Swap calibrated palette colors for the colors the device is driven with.

    Pixels are compared on exact RGB value against ``mapping.original_colors``.
    A pixel with no match is left untouched and counted; mismatches are
    reported, never raised, since the substitution is cosmetic.
    """

    usable = mapping.usable_length
    lookup = {}
    for index in range(usable):
        # First occurrence wins for duplicated originals.
        lookup.setdefault(tuple(mapping.original_colors[index][:3]), mapping.device_colors[index])

    replaced = 0
    mismatched = 0
    for row in buffer.rows:
        for x, pixel in enumerate(row):
            device = lookup.get((pixel[0], pixel[1], pixel[2]))
            if device is None:
                mismatched += 1
                continue
            if len(pixel) > 3:
                alpha = device[3] if len(device) > 3 else pixel[3]
                row[x] = [device[0], device[1], device[2], alpha]
            else:
                row[x] = [device[0], device[1], device[2]]
            replaced += 1

    if mismatched:
        logger.warning("%d pixels were not replaced (colors didn't match exactly)", mismatched)
    return ReplacementResult(replaced=replaced, mismatched=mismatched)
