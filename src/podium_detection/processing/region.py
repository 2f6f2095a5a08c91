"""
Read-only rectangular views over decoded RGB rasters.

A raster is an (H, W, 3) uint8 numpy array. A Region never copies pixel data:
its `pixels` attribute is a non-writeable numpy slice of the parent raster.
Coordinates handed to a Region are local to its own top-left corner.
"""

from typing import Tuple, Union

import numpy as np

Color = Tuple[int, int, int]


class OutOfBoundsError(IndexError):
    """A sub-region or pixel lookup falls outside its parent."""


class Region:
    """
    Rectangular view into an RGB raster.

    Attributes:
        pixels: Read-only (height, width, 3) view of the parent raster.
        left: Absolute x offset of the view in the root raster.
        top: Absolute y offset of the view in the root raster.
    """

    def __init__(self, pixels: np.ndarray, left: int = 0, top: int = 0):
        """
        Wrap a raster (or a slice of one) as a region.

        Args:
            pixels: (H, W, 3) uint8 array.
            left: Absolute x offset of `pixels` in the root raster.
            top: Absolute y offset of `pixels` in the root raster.
        """
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) RGB raster, got shape {pixels.shape}")

        view = pixels.view()
        view.flags.writeable = False
        self.pixels = view
        self.left = left
        self.top = top

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width) of the region."""
        return self.pixels.shape[:2]

    def subregion(self, left: int, top: int, width: int, height: int) -> 'Region':
        """Extract a sub-rectangle in this region's local coordinates."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Region size must be positive, got {width}x{height}")

        if left < 0 or top < 0 or left + width > self.width or top + height > self.height:
            raise OutOfBoundsError(
                f"Region ({left}, {top}, {width}x{height}) exceeds parent of size "
                f"{self.width}x{self.height}"
            )

        view = self.pixels[top:top + height, left:left + width]
        return Region(view, left=self.left + left, top=self.top + top)

    def pixel_at(self, x: int, y: int) -> Color:
        """Color of the pixel at local (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"Pixel ({x}, {y}) outside region of size {self.width}x{self.height}"
            )

        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def contains(self, x: int, y: int) -> bool:
        """Check if local (x, y) lies inside the region."""
        return 0 <= x < self.width and 0 <= y < self.height

    def __repr__(self) -> str:
        return f"Region(left={self.left}, top={self.top}, width={self.width}, height={self.height})"


def as_region(source: Union[Region, np.ndarray]) -> Region:
    """Wrap a raw raster as a Region, passing Regions through."""
    if isinstance(source, Region):
        return source
    return Region(np.asarray(source))


def subregion(
    parent: Union[Region, np.ndarray],
    left: int,
    top: int,
    width: int,
    height: int
) -> Region:
    """
    Extract a rectangular view of a raster or region.

    Args:
        parent: Full raster array or an existing Region.
        left: Left edge, local to `parent`.
        top: Top edge, local to `parent`.
        width: Width in pixels.
        height: Height in pixels.

    Returns:
        Region viewing the requested rectangle.

    Raises:
        OutOfBoundsError: If the rectangle does not fit inside `parent`.
    """
    return as_region(parent).subregion(left, top, width, height)


def pixel_at(region: Union[Region, np.ndarray], x: int, y: int) -> Color:
    """
    Look up a pixel in region-local coordinates.

    Raises:
        OutOfBoundsError: If (x, y) is outside the region.
    """
    return as_region(region).pixel_at(x, y)
