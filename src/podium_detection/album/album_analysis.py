"""
Batch analysis of a podium album.

Each screenshot is processed on its own; images whose player count can't be
determined, or that can't be decoded, are skipped rather than guessed.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from ..banner.fingerprint import BannerFingerprint
from ..placards.placard_detector import UndeterminedPlayerCountError
from ..podium.podium_image import ImageDecodeError, PodiumImage
from ..processing.layout import PodiumLayout, default_layout
from .album_reader import list_album_files, parse_album_timestamp


class PodiumResult:
    """Analysis of a single podium screenshot."""

    def __init__(
        self,
        path: Path,
        timestamp: datetime,
        player_count: int,
        fingerprint: BannerFingerprint
    ):
        self.path = path
        self.timestamp = timestamp
        self.player_count = player_count
        self.fingerprint = fingerprint

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'path': str(self.path),
            'timestamp': self.timestamp.isoformat(),
            'player_count': self.player_count,
            'banner_size': [self.fingerprint.width, self.fingerprint.height],
            'indeterminate_pixels': self.fingerprint.indeterminate_count(),
        }

    def __repr__(self) -> str:
        return f"PodiumResult({self.path.name}, players={self.player_count})"


def analyze_podium_file(path: Union[str, Path], layout: Optional[PodiumLayout] = None) -> PodiumResult:
    """
    Analyze one album screenshot.

    Raises:
        ValueError: If the filename is not an album timestamp.
        ImageDecodeError: If the image can't be decoded.
        UndeterminedPlayerCountError: If the player count can't be determined.
    """
    path = Path(path)
    timestamp = parse_album_timestamp(path)
    podium = PodiumImage.from_file(path, layout=layout)
    return PodiumResult(
        path=path,
        timestamp=timestamp,
        player_count=podium.player_count(),
        fingerprint=podium.victor_fingerprint(),
    )


def analyze_album(
    folder: Union[str, Path],
    layout: Optional[PodiumLayout] = None,
    verbose: bool = True
) -> List[PodiumResult]:
    """
    Analyze every screenshot in an album folder.

    Args:
        folder: Album folder path.
        layout: Podium layout shared by all images.
        verbose: Print progress and skipped files.

    Returns:
        Results sorted by timestamp.
    """
    if layout is None:
        layout = default_layout()

    files = list_album_files(folder)
    if verbose:
        print(f"Found {len(files)} files")

    results = []
    for path in files:
        try:
            results.append(analyze_podium_file(path, layout))
        except (UndeterminedPlayerCountError, ImageDecodeError) as e:
            if verbose:
                print(f"Skipping {path.name}: {e}")

    results.sort(key=lambda r: r.timestamp)
    if verbose:
        print(f"Analyzed {len(results)}/{len(files)} podium images")
    return results


def group_by_victor(results: List[PodiumResult]) -> List[List[PodiumResult]]:
    """
    Group results whose victor banners match.

    Each result joins the first group whose first member's fingerprint it
    matches; otherwise it starts a new group. Fingerprints of a different
    size never match and start their own group.
    """
    groups: List[List[PodiumResult]] = []
    for result in results:
        for group in groups:
            reference = group[0].fingerprint
            if reference.shape == result.fingerprint.shape and reference.matches(result.fingerprint):
                group.append(result)
                break
        else:
            groups.append([result])
    return groups
