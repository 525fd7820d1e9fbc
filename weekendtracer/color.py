"""Colour conversion and PPM pixel output."""

from __future__ import annotations

import math
from typing import TextIO

from .interval import Interval
from .vec3 import Vec3

Color = Vec3

_INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """Apply a gamma-2 transform; non-positive values map to zero."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def color_to_bytes(pixel_color: Color) -> tuple[int, int, int]:
    """Convert a linear colour to gamma-corrected bytes in [0, 255]."""
    result = []
    for component in pixel_color:
        if math.isnan(component):
            component = 0.0
        result.append(int(256 * _INTENSITY.clamp(linear_to_gamma(component))))
    return result[0], result[1], result[2]


def write_color(out: TextIO, pixel_color: Color) -> None:
    """Write one pixel as a PPM text line."""
    r, g, b = color_to_bytes(pixel_color)
    out.write(f"{r} {g} {b}\n")