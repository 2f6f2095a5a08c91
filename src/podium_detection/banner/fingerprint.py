"""
Victor banner fingerprints.

Every banner pixel is classified as background (light tone), foreground
(dark tone) or indeterminate. A pixel is only trusted when it and its four
orthogonal neighbours all belong to the two-tone palette; this rejects
anti-aliasing halos that happen to hit a palette color. Neighbours outside
the banner always count as palette colors.

Fingerprints are compared with indeterminate pixels as wildcards, so a
partly covered banner still matches a clean one of the same player.
"""

from typing import Union

import numpy as np

from ..processing.region import Region, as_region
from .palette import Palette, estimate_palette


class BannerPixel:
    """Classification values stored in a BannerFingerprint."""
    INDETERMINATE = 0
    BACKGROUND = 1
    FOREGROUND = 2


def _color_mask(pixels: np.ndarray, color) -> np.ndarray:
    return np.all(pixels == np.asarray(color, dtype=pixels.dtype), axis=2)


def _pure_neighbourhood(in_palette: np.ndarray) -> np.ndarray:
    """Mask of pixels whose 4 neighbours are all in the palette or off the edge."""
    padded = np.pad(in_palette, 1, mode='constant', constant_values=True)
    return (
        padded[:-2, 1:-1]     # up
        & padded[2:, 1:-1]    # down
        & padded[1:-1, :-2]   # left
        & padded[1:-1, 2:]    # right
    )


class BannerFingerprint:
    """
    Classified banner raster.

    Attributes:
        pixels: Read-only (height, width) uint8 array of BannerPixel values.
        palette: Palette the banner was classified with.
    """

    def __init__(self, pixels: np.ndarray, palette: Palette):
        pixels = np.array(pixels, dtype=np.uint8)
        if pixels.ndim != 2:
            raise ValueError(f"Expected a 2D classified raster, got shape {pixels.shape}")
        pixels.flags.writeable = False
        self.pixels = pixels
        self.palette = palette

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def shape(self):
        return self.pixels.shape

    def at(self, x: int, y: int) -> int:
        """Classification of the pixel at (x, y)."""
        return int(self.pixels[y, x])

    def indeterminate_count(self) -> int:
        """Number of wildcard pixels."""
        return int(np.count_nonzero(self.pixels == BannerPixel.INDETERMINATE))

    def matches(self, other: 'BannerFingerprint') -> bool:
        """Check compatibility with another fingerprint."""
        return matches(self, other)

    def __repr__(self) -> str:
        return (
            f"BannerFingerprint({self.width}x{self.height}, "
            f"indeterminate={self.indeterminate_count()}, palette={tuple(self.palette)})"
        )


def classify_pixel(region: Union[Region, np.ndarray], x: int, y: int, palette: Palette) -> int:
    """
    Classify a single banner pixel.

    Args:
        region: Banner region.
        x, y: Region-local pixel coordinates.
        palette: Banner palette.

    Returns:
        BannerPixel value.
    """
    region = as_region(region)
    color = region.pixel_at(x, y)

    def in_palette(nx: int, ny: int) -> bool:
        if not region.contains(nx, ny):
            return True
        neighbour = region.pixel_at(nx, ny)
        return neighbour == palette.light or neighbour == palette.dark

    pure = (
        in_palette(x - 1, y)
        and in_palette(x + 1, y)
        and in_palette(x, y - 1)
        and in_palette(x, y + 1)
    )

    if color == palette.light and pure:
        return BannerPixel.BACKGROUND
    if color == palette.dark and pure:
        return BannerPixel.FOREGROUND
    return BannerPixel.INDETERMINATE


def classify(region: Union[Region, np.ndarray], palette: Palette) -> BannerFingerprint:
    """
    Classify every pixel of a banner region.

    Args:
        region: Banner region.
        palette: Light/dark colors to classify against.

    Returns:
        BannerFingerprint with the same dimensions as `region`.
    """
    pixels = as_region(region).pixels

    is_light = _color_mask(pixels, palette.light)
    is_dark = _color_mask(pixels, palette.dark)
    pure = _pure_neighbourhood(is_light | is_dark)

    classified = np.full(pixels.shape[:2], BannerPixel.INDETERMINATE, dtype=np.uint8)
    # Dark first so the light rule wins when both tones are the same color
    classified[is_dark & pure] = BannerPixel.FOREGROUND
    classified[is_light & pure] = BannerPixel.BACKGROUND

    return BannerFingerprint(classified, palette)


def fingerprint_banner(region: Union[Region, np.ndarray]) -> BannerFingerprint:
    """Estimate the banner palette and classify the banner with it."""
    region = as_region(region)
    return classify(region, estimate_palette(region))


def matches(a: BannerFingerprint, b: BannerFingerprint) -> bool:
    """
    Compare two fingerprints, treating indeterminate pixels as wildcards.

    Returns:
        True if no pixel is definitely background in one and foreground in
        the other.

    Raises:
        ValueError: If the fingerprints have different dimensions.
    """
    if a.shape != b.shape:
        raise ValueError(f"Cannot compare fingerprints of shapes {a.shape} and {b.shape}")

    definite = (a.pixels != BannerPixel.INDETERMINATE) & (b.pixels != BannerPixel.INDETERMINATE)
    return not np.any(definite & (a.pixels != b.pixels))
