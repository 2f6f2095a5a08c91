"""
Score placard detection and player count resolution.

A score placard is a small flat panel under each podium slot showing the
player's score. Real placards contain a background color plus one or two
digit colors (white shows up as a digit anti-aliasing color), while textured
backgrounds or overlapping UI produce many more distinct colors.
"""

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..processing.constants import WHITE
from ..processing.layout import PodiumLayout, default_layout
from ..processing.region import Region, as_region


class UndeterminedPlayerCountError(RuntimeError):
    """None of the known placard layouts matched the podium image."""


def distinct_colors(region: Region) -> np.ndarray:
    """
    Get the distinct colors of a region.

    Returns:
        (N, 3) array of unique RGB colors.
    """
    return np.unique(region.pixels.reshape(-1, 3), axis=0)


def is_score_placard(region: Region) -> bool:
    """
    Check if a region looks like a score placard.

    True when the region has exactly 2 distinct colors, or exactly 3 with
    one of them pure white.
    """
    colors = distinct_colors(as_region(region))
    if len(colors) == 2:
        return True
    if len(colors) == 3:
        return any(tuple(int(c) for c in color) == WHITE for color in colors)
    return False


def is_placard_at(
    image: Union[Region, np.ndarray],
    position: Tuple[int, int],
    layout: Optional[PodiumLayout] = None
) -> bool:
    """
    Check if a score placard has its top-left corner at `position`.

    Args:
        image: Full podium image.
        position: (x, y) top-left of the candidate placard.
        layout: Podium layout, for the placard size.
    """
    if layout is None:
        layout = default_layout()

    left, top = position
    width, height = layout.placard_size
    return is_score_placard(as_region(image).subregion(left, top, width, height))


def placard_flags(
    image: Union[Region, np.ndarray],
    positions: Sequence[Tuple[int, int]],
    layout: Optional[PodiumLayout] = None
) -> List[bool]:
    """Probe every position for a placard, in order."""
    if layout is None:
        layout = default_layout()
    return [is_placard_at(image, pos, layout) for pos in positions]


def resolve_player_count(
    image: Union[Region, np.ndarray],
    layout: Optional[PodiumLayout] = None
) -> int:
    """
    Determine how many players are on the podium.

    Checks, in order: all 4-player placards, the middle pair of the 4-player
    grid (2 players), then all 3-player placards. The middle-pair check must
    precede the 3-player check.

    Args:
        image: Full podium image.
        layout: Podium layout, default layout if None.

    Returns:
        Player count (2, 3 or 4).

    Raises:
        UndeterminedPlayerCountError: If no placard layout matches.
    """
    if layout is None:
        layout = default_layout()
    image = as_region(image)

    four_player_flags = placard_flags(image, layout.four_player_positions, layout)
    if all(four_player_flags):
        return 4

    if all(four_player_flags[i] for i in layout.two_player_indices):
        return 2

    three_player_flags = placard_flags(image, layout.three_player_positions, layout)
    if all(three_player_flags):
        return 3

    raise UndeterminedPlayerCountError(
        f"Couldn't determine number of players "
        f"(4-player probes: {four_player_flags}, 3-player probes: {three_player_flags})"
    )
