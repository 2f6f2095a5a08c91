"""
Fingerprint and timeline rendering.

Run:
  pytest tests/test_visualization.py
"""

from datetime import datetime, timedelta

import numpy as np
import pytest

from podium_detection.banner import fingerprint_banner
from podium_detection.utils import fingerprint_to_image, render_timeline, save_image
from podium_detection.utils.visualization import (
    BACKGROUND_COLOR,
    FOREGROUND_COLOR,
    INDETERMINATE_COLOR,
)

from podium_fixtures import make_banner


def test_fingerprint_to_image_colors() -> None:
    fp = fingerprint_banner(make_banner(text=[(20, 8, 4, 6)], halo=[(19, 8)]))
    vis = fingerprint_to_image(fp, scale=1)
    assert vis.shape == (23, 179, 3)
    assert tuple(vis[5, 5]) == BACKGROUND_COLOR
    assert tuple(vis[10, 21]) == FOREGROUND_COLOR
    assert tuple(vis[8, 19]) == INDETERMINATE_COLOR


def test_fingerprint_to_image_scales() -> None:
    fp = fingerprint_banner(make_banner())
    vis = fingerprint_to_image(fp, scale=4)
    assert vis.shape == (92, 716, 3)
    # (11, 10) is foreground; each pixel becomes a 4x4 block
    assert np.all(vis[40:44, 44:48] == 0)


def test_fingerprint_to_image_rejects_bad_scale() -> None:
    with pytest.raises(ValueError):
        fingerprint_to_image(fingerprint_banner(make_banner()), scale=0)


def test_render_timeline() -> None:
    start = datetime(2016, 10, 16, 15, 22)
    datetimes = [start + timedelta(days=3 * i, hours=i) for i in range(20)]
    vis = render_timeline(datetimes, size=(800, 600))
    assert vis.shape == (600, 800, 3)
    assert vis.dtype == np.uint8
    assert np.any(vis != 255)


def test_render_timeline_single_point() -> None:
    vis = render_timeline([datetime(2020, 4, 25, 21, 1)])
    assert vis.shape == (768, 1024, 3)


def test_render_timeline_empty() -> None:
    with pytest.raises(ValueError):
        render_timeline([])


def test_save_image(tmp_path) -> None:
    path = tmp_path / "fingerprint.png"
    assert save_image(fingerprint_to_image(fingerprint_banner(make_banner())), path)
    assert path.exists()
