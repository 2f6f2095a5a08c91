"""
Synthetic podium screenshots for tests.

Builds images with the real podium layout: a noisy background (so anything
that isn't a placard has many colors), flat two-color score placards, and a
two-tone victor banner with blocky "text".
"""

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from podium_detection.processing.constants import (
    FOUR_PLAYER_PLACARD_POSITIONS,
    PLACARD_SIZE,
    PODIUM_SIZE,
    THREE_PLAYER_PLACARD_POSITIONS,
    VICTOR_BANNER_POSITION,
    VICTOR_BANNER_SIZE,
    WHITE,
)

PLACARD_COLOR = (40, 40, 120)
DIGIT_COLOR = (255, 200, 0)

DEFAULT_LIGHT = (232, 232, 232)
DEFAULT_DARK = (0, 0, 3)
HALO_COLOR = (120, 120, 120)
OVERLAY_COLOR = (128, 64, 200)

# (x, y, width, height) blocks in banner-local coordinates
TEXT_A = [(10, 6, 3, 11), (16, 6, 8, 3), (16, 14, 8, 3), (30, 6, 3, 11), (36, 12, 6, 5), (60, 6, 4, 11)]
TEXT_B = [(100, 6, 10, 11), (120, 6, 3, 11), (130, 9, 12, 4)]

PLACARD_POSITIONS = {
    4: FOUR_PLAYER_PLACARD_POSITIONS,
    3: THREE_PLAYER_PLACARD_POSITIONS,
    2: [FOUR_PLAYER_PLACARD_POSITIONS[1], FOUR_PLAYER_PLACARD_POSITIONS[2]],
}


def noise_image(seed: int = 0, size: Tuple[int, int] = PODIUM_SIZE) -> np.ndarray:
    """Random RGB image of (width, height) `size`."""
    w, h = size
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, (h, w, 3), dtype=np.uint8)


def make_placard(with_white: bool = False) -> np.ndarray:
    """21x8 placard: flat background, a digit, optionally a white pixel."""
    w, h = PLACARD_SIZE
    placard = np.empty((h, w, 3), dtype=np.uint8)
    placard[:] = PLACARD_COLOR
    placard[2:6, 8:10] = DIGIT_COLOR
    if with_white:
        placard[3, 12] = WHITE
    return placard


def draw_placard(image: np.ndarray, position: Tuple[int, int], with_white: bool = False):
    left, top = position
    w, h = PLACARD_SIZE
    image[top:top + h, left:left + w] = make_placard(with_white)


def make_banner(
    light=DEFAULT_LIGHT,
    dark=DEFAULT_DARK,
    text: Sequence[Tuple[int, int, int, int]] = TEXT_A,
    halo: Iterable[Tuple[int, int]] = ()
) -> np.ndarray:
    """179x23 two-tone banner with `text` blocks and optional halo pixels."""
    w, h = VICTOR_BANNER_SIZE
    banner = np.empty((h, w, 3), dtype=np.uint8)
    banner[:] = light
    for x, y, bw, bh in text:
        banner[y:y + bh, x:x + bw] = dark
    for x, y in halo:
        banner[y, x] = HALO_COLOR
    return banner


def obscure(banner: np.ndarray, rect=(40, 4, 30, 10), color=OVERLAY_COLOR) -> np.ndarray:
    """Copy of `banner` with a flat rectangle painted over it."""
    x, y, w, h = rect
    covered = banner.copy()
    covered[y:y + h, x:x + w] = color
    return covered


def make_podium(
    player_count: Optional[int] = 4,
    banner: Optional[np.ndarray] = None,
    seed: int = 0,
    with_white: bool = False
) -> np.ndarray:
    """
    Full 320x180 podium screenshot.

    Args:
        player_count: 2, 3 or 4 placards; None for no placards at all.
        banner: Banner pixels, TEXT_A banner if None.
        seed: Background noise seed.
        with_white: Add a white pixel to every placard.
    """
    image = noise_image(seed)
    if player_count is not None:
        for position in PLACARD_POSITIONS[player_count]:
            draw_placard(image, position, with_white)

    if banner is None:
        banner = make_banner()
    left, top = VICTOR_BANNER_POSITION
    w, h = VICTOR_BANNER_SIZE
    image[top:top + h, left:left + w] = banner
    return image


def save_png(image: np.ndarray, path) -> None:
    Image.fromarray(image).save(path)
