"""
Rendering helpers for fingerprints and album timelines.

All images produced here are BGR numpy arrays, ready for cv2.imwrite/imshow.
"""

from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Tuple, Union

import cv2
import numpy as np

from ..album.album_reader import fractional_hour
from ..banner.fingerprint import BannerFingerprint, BannerPixel

# BGR colors
BACKGROUND_COLOR = (255, 255, 255)
FOREGROUND_COLOR = (0, 0, 0)
INDETERMINATE_COLOR = (255, 0, 255)  # Magenta
POINT_COLOR = (0, 160, 0)            # Green
AXIS_COLOR = (0, 0, 0)

# Timeline chart layout (pixels)
CHART_MARGIN = 40
WEEK_STRIP_HEIGHT = 100
HOUR_STRIP_WIDTH = 120


def fingerprint_to_image(fingerprint: BannerFingerprint, scale: int = 4) -> np.ndarray:
    """
    Render a fingerprint for inspection.

    Args:
        fingerprint: Classified banner.
        scale: Integer upscaling factor.

    Returns:
        BGR image of size (height*scale, width*scale).
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    lut = np.zeros((3, 3), dtype=np.uint8)
    lut[BannerPixel.INDETERMINATE] = INDETERMINATE_COLOR
    lut[BannerPixel.BACKGROUND] = BACKGROUND_COLOR
    lut[BannerPixel.FOREGROUND] = FOREGROUND_COLOR

    vis = lut[fingerprint.pixels]
    if scale > 1:
        vis = cv2.resize(
            vis,
            (fingerprint.width * scale, fingerprint.height * scale),
            interpolation=cv2.INTER_NEAREST
        )
    return vis


def render_timeline(
    datetimes: List[datetime],
    size: Tuple[int, int] = (1024, 768)
) -> np.ndarray:
    """
    Plot when podium screenshots were taken.

    Scatter of date (x) against time of day (y), with a per-week histogram
    above and a per-hour histogram to the right.

    Args:
        datetimes: Capture times.
        size: Output (width, height).

    Returns:
        BGR chart image.
    """
    if not datetimes:
        raise ValueError("Cannot plot an empty list of datetimes")

    w, h = size
    vis = np.full((h, w, 3), 255, dtype=np.uint8)

    # Scatter area
    x0, x1 = CHART_MARGIN, w - HOUR_STRIP_WIDTH
    y0, y1 = WEEK_STRIP_HEIGHT, h - CHART_MARGIN
    if x1 <= x0 or y1 <= y0:
        raise ValueError(f"Chart size {size} is too small")

    start = min(datetimes)
    offsets = np.array([(d - start).total_seconds() for d in datetimes], dtype=np.float64)
    span = max(float(offsets.max()), 1.0)
    hours = np.array([fractional_hour(d) for d in datetimes], dtype=np.float64)

    cv2.rectangle(vis, (x0, y0), (x1, y1), AXIS_COLOR, 1)
    for hour in range(0, 25, 6):
        y = int(y1 - hour / 24.0 * (y1 - y0))
        cv2.putText(vis, f"{hour:02d}", (4, y + 4), cv2.FONT_HERSHEY_SIMPLEX, 0.4, AXIS_COLOR, 1)

    for offset, hour in zip(offsets, hours):
        x = int(x0 + offset / span * (x1 - x0))
        y = int(y1 - hour / 24.0 * (y1 - y0))
        cv2.circle(vis, (x, y), 2, POINT_COLOR, -1)

    # Per-week histogram above the scatter
    week = timedelta(weeks=1).total_seconds()
    n_weeks = max(int(np.ceil(span / week)), 1)
    week_counts, _ = np.histogram(offsets, bins=n_weeks, range=(0.0, n_weeks * week))
    slot_w = (x1 - x0) / float(n_weeks)
    max_count = max(int(week_counts.max()), 1)
    for i, count in enumerate(week_counts):
        if count == 0:
            continue
        bar_h = int(count / max_count * (WEEK_STRIP_HEIGHT - 20))
        bx0 = int(x0 + i * slot_w)
        bx1 = max(int(x0 + (i + 1) * slot_w) - 1, bx0)
        cv2.rectangle(vis, (bx0, y0 - 5 - bar_h), (bx1, y0 - 5), POINT_COLOR, -1)

    # Per-hour histogram right of the scatter
    hour_counts, _ = np.histogram(hours, bins=24, range=(0.0, 24.0))
    slot_h = (y1 - y0) / 24.0
    max_count = max(int(hour_counts.max()), 1)
    for hour, count in enumerate(hour_counts):
        if count == 0:
            continue
        bar_w = int(count / max_count * (HOUR_STRIP_WIDTH - 20))
        by1 = int(y1 - hour * slot_h)
        by0 = min(int(y1 - (hour + 1) * slot_h) + 1, by1)
        cv2.rectangle(vis, (x1 + 5, by0), (x1 + 5 + bar_w, by1), POINT_COLOR, -1)

    return vis


def save_image(image: np.ndarray, path: Union[str, Path]) -> bool:
    """
    Save a BGR image to file.

    Returns:
        True if OpenCV wrote the file.
    """
    return bool(cv2.imwrite(str(path), image))
