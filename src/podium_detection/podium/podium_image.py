"""
Full podium screenshot.

Wraps a decoded podium image and exposes the player count and the victor
banner fingerprint.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from ..banner.fingerprint import BannerFingerprint, classify
from ..banner.palette import Palette, estimate_palette
from ..placards.placard_detector import resolve_player_count
from ..processing.layout import PodiumLayout, default_layout
from ..processing.region import Region


class ImageDecodeError(ValueError):
    """A screenshot could not be read or decoded as an RGB image."""


def load_image_rgb(path: Union[str, Path]) -> np.ndarray:
    """
    Decode an image file to RGB pixels.

    Args:
        path: Image file path.

    Returns:
        uint8 RGB array with shape (H, W, 3).

    Raises:
        ImageDecodeError: If the file is missing or not a decodable image.
    """
    try:
        with Image.open(path) as img:
            return np.asarray(img.convert("RGB"), dtype=np.uint8)
    except OSError as e:
        raise ImageDecodeError(f"Could not read image: {path} ({e})") from e


class PodiumImage:
    """
    A decoded podium screenshot.

    Example:
        ```python
        podium = PodiumImage.from_file("12-15-16 18;50.png")
        print(f"Players: {podium.player_count()}")
        fingerprint = podium.victor_fingerprint()
        ```
    """

    def __init__(
        self,
        pixels: np.ndarray,
        filepath: Optional[Union[str, Path]] = None,
        layout: Optional[PodiumLayout] = None
    ):
        """
        Initialize from decoded pixels.

        Args:
            pixels: (H, W, 3) uint8 RGB array.
            filepath: Source file, if any.
            layout: Podium layout, default layout if None.
        """
        pixels = np.asarray(pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) RGB image, got shape {pixels.shape}")

        self.image = pixels.copy()
        self.image.flags.writeable = False
        self.filepath = Path(filepath) if filepath is not None else None
        self.layout = layout if layout is not None else default_layout()

    @classmethod
    def from_file(cls, path: Union[str, Path], layout: Optional[PodiumLayout] = None) -> 'PodiumImage':
        """
        Load a podium screenshot from disk.

        Raises:
            ImageDecodeError: If the file cannot be decoded.
        """
        return cls(load_image_rgb(path), filepath=path, layout=layout)

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]

    def region(self) -> Region:
        """The whole image as a Region."""
        return Region(self.image)

    def player_count(self) -> int:
        """
        Number of players on the podium.

        Raises:
            UndeterminedPlayerCountError: If no placard layout matches.
        """
        return resolve_player_count(self.region(), self.layout)

    def victor_banner(self) -> Region:
        """The "Player X Wins" banner region."""
        left, top = self.layout.victor_banner_position
        width, height = self.layout.victor_banner_size
        return self.region().subregion(left, top, width, height)

    def victor_palette(self) -> Palette:
        """Light/dark tones of the victor banner."""
        return estimate_palette(self.victor_banner())

    def victor_fingerprint(self) -> BannerFingerprint:
        """Classified victor banner."""
        banner = self.victor_banner()
        return classify(banner, estimate_palette(banner))

    def __repr__(self) -> str:
        name = self.filepath.name if self.filepath is not None else '<memory>'
        return f"PodiumImage({name}, {self.width}x{self.height})"
