"""
Pixel access and layout configuration for podium screenshots.
"""

from .region import (
    Color,
    Region,
    OutOfBoundsError,
    as_region,
    subregion,
    pixel_at
)
from .layout import PodiumLayout, default_layout
from .constants import (
    PODIUM_SIZE,
    PLACARD_SIZE,
    FOUR_PLAYER_PLACARD_POSITIONS,
    THREE_PLAYER_PLACARD_POSITIONS,
    TWO_PLAYER_PLACARD_INDICES,
    VICTOR_BANNER_POSITION,
    VICTOR_BANNER_SIZE,
    WHITE,
    BLACK
)

__all__ = [
    'Color',
    'Region',
    'OutOfBoundsError',
    'as_region',
    'subregion',
    'pixel_at',
    'PodiumLayout',
    'default_layout',
    'PODIUM_SIZE',
    'PLACARD_SIZE',
    'FOUR_PLAYER_PLACARD_POSITIONS',
    'THREE_PLAYER_PLACARD_POSITIONS',
    'TWO_PLAYER_PLACARD_INDICES',
    'VICTOR_BANNER_POSITION',
    'VICTOR_BANNER_SIZE',
    'WHITE',
    'BLACK'
]
