"""RGB and HSL decompositions of a Color.

HSL components are rounded half away from zero (not Python's banker's
rounding), so 12.5% lightness reports as 13. A hue that rounds up to 360
degrees is reported as 0.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass

from contrast_checker.core.colour import Color


@dataclass(frozen=True)
class RgbValue:
    red: int
    green: int
    blue: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class HslValue:
    hue: int  # degrees, [0, 360)
    saturation: int  # percent
    lightness: int  # percent

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def _round_half_up(x: float) -> int:
    # snap float error first so exact .5 ties like 197.49999999999997 go up
    return int(math.floor(round(x, 9) + 0.5))


def hex_to_rgb(colour: Color) -> RgbValue:
    return RgbValue(red=colour.red, green=colour.green, blue=colour.blue)


def hex_to_hsl(colour: Color) -> HslValue:
    r = colour.red / 255
    g = colour.green / 255
    b = colour.blue / 255

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        hue = 0.0
        saturation = 0.0
    else:
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return HslValue(
        hue=_round_half_up(hue * 360) % 360,
        saturation=_round_half_up(saturation * 100),
        lightness=_round_half_up(lightness * 100),
    )
