"""
Rendering utilities for podium analysis.
"""

from .visualization import (
    fingerprint_to_image,
    render_timeline,
    save_image
)

__all__ = [
    'fingerprint_to_image',
    'render_timeline',
    'save_image'
]
