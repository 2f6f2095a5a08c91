"""Victor banner palette estimation and fingerprinting."""

from .palette import (
    Palette,
    border_color_counts,
    determine_light_color,
    determine_dark_color,
    estimate_palette
)
from .fingerprint import (
    BannerPixel,
    BannerFingerprint,
    classify_pixel,
    classify,
    fingerprint_banner,
    matches
)

__all__ = [
    'Palette',
    'border_color_counts',
    'determine_light_color',
    'determine_dark_color',
    'estimate_palette',
    'BannerPixel',
    'BannerFingerprint',
    'classify_pixel',
    'classify',
    'fingerprint_banner',
    'matches'
]
