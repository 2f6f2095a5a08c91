"""
Two-tone palette estimation for the victor banner.

The banner's colors change with the game theme, so they are measured per
image: the border of the banner is almost entirely background ("light"),
and the darkest pixel anywhere in it belongs to the text ("dark").
"""

from collections import Counter
from typing import Iterator, NamedTuple, Union

import numpy as np

from ..processing.region import Color, Region, as_region


class Palette(NamedTuple):
    """Light (background) and dark (foreground) banner colors."""
    light: Color
    dark: Color


def _check_not_empty(region: Region):
    if region.width == 0 or region.height == 0:
        raise ValueError(f"Cannot estimate a palette for an empty region: {region!r}")


def iter_border_colors(region: Region) -> Iterator[Color]:
    """
    Iterate over the border pixels of a region, each exactly once.

    Order: top row, bottom row, then the left and right columns without
    their corner pixels.
    """
    w, h = region.width, region.height

    rows = [0] if h == 1 else [0, h - 1]
    for y in rows:
        for x in range(w):
            yield region.pixel_at(x, y)

    columns = [0] if w == 1 else [0, w - 1]
    for x in columns:
        for y in range(1, h - 1):
            yield region.pixel_at(x, y)


def border_color_counts(region: Union[Region, np.ndarray]) -> Counter:
    """
    Count how often each color occurs on the region's border.

    Returns:
        Counter mapping color -> count, in first-seen order.
    """
    region = as_region(region)
    _check_not_empty(region)
    return Counter(iter_border_colors(region))


def determine_light_color(region: Union[Region, np.ndarray]) -> Color:
    """
    Most frequent border color of the region.

    Ties go to the color seen first in border order.
    """
    counts = border_color_counts(region)
    # max() keeps the first of equal counts; Counter preserves insertion order
    color, _ = max(counts.items(), key=lambda item: item[1])
    return color


def determine_dark_color(region: Union[Region, np.ndarray]) -> Color:
    """
    Darkest pixel of the region by R+G+B.

    Ties go to the first pixel in row-major order.
    """
    region = as_region(region)
    _check_not_empty(region)

    brightness = region.pixels.astype(np.int32).sum(axis=2)
    y, x = np.unravel_index(np.argmin(brightness), brightness.shape)
    return region.pixel_at(int(x), int(y))


def estimate_palette(region: Union[Region, np.ndarray]) -> Palette:
    """Estimate both banner tones."""
    region = as_region(region)
    return Palette(light=determine_light_color(region), dark=determine_dark_color(region))
