"""Full podium screenshot handling."""

from .podium_image import PodiumImage, ImageDecodeError, load_image_rgb

__all__ = ['PodiumImage', 'ImageDecodeError', 'load_image_rgb']
