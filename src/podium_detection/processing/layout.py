"""
Podium screen layout: placard and banner coordinates.

Defaults come from constants.py. A podium_layout.json file can override them,
but only when its path is passed to PodiumLayout explicitly.
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import (
    FOUR_PLAYER_PLACARD_POSITIONS,
    PLACARD_SIZE,
    THREE_PLAYER_PLACARD_POSITIONS,
    TWO_PLAYER_PLACARD_INDICES,
    VICTOR_BANNER_POSITION,
    VICTOR_BANNER_SIZE,
)

LAYOUT_KEYS = {
    'placard_size',
    'four_player_positions',
    'three_player_positions',
    'two_player_indices',
    'victor_banner_position',
    'victor_banner_size',
}


def _pair(value, key: str, positive: bool = False) -> Tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"Layout key '{key}' expects a pair of integers, got {value!r}")
    a, b = value
    # bool is an int subclass; JSON true/false are not coordinates
    if any(isinstance(v, bool) or not isinstance(v, int) for v in (a, b)):
        raise ValueError(f"Layout key '{key}' expects a pair of integers, got {value!r}")
    lowest = 1 if positive else 0
    if a < lowest or b < lowest:
        kind = "positive" if positive else "non-negative"
        raise ValueError(f"Layout key '{key}' expects {kind} integers, got {value!r}")
    return a, b


def _pairs(value, key: str) -> List[Tuple[int, int]]:
    if not isinstance(value, (list, tuple)) or not value:
        raise ValueError(f"Layout key '{key}' expects a non-empty list of pairs, got {value!r}")
    return [_pair(v, key) for v in value]


class PodiumLayout:
    """
    Pixel layout of the podium screen.

    Attributes:
        placard_size: (width, height) of a score placard.
        four_player_positions: Placard top-lefts for the 4-player podium.
        three_player_positions: Placard top-lefts for the 3-player podium.
        two_player_indices: Indices into four_player_positions used by a
            2-player podium.
        victor_banner_position: Top-left of the victor banner.
        victor_banner_size: (width, height) of the victor banner.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize the layout.

        Args:
            config_path: Path to a podium_layout.json override file. When None,
                the built-in defaults are used and no file is read.
        """
        self.placard_size = PLACARD_SIZE
        self.four_player_positions = list(FOUR_PLAYER_PLACARD_POSITIONS)
        self.three_player_positions = list(THREE_PLAYER_PLACARD_POSITIONS)
        self.two_player_indices = TWO_PLAYER_PLACARD_INDICES
        self.victor_banner_position = VICTOR_BANNER_POSITION
        self.victor_banner_size = VICTOR_BANNER_SIZE

        if config_path is None:
            return

        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, 'r') as f:
                try:
                    config = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid layout file {config_path}: {e}") from e
            self.update(config)
            print(f"Loaded podium layout from {config_path}")

    def update(self, config: dict):
        """Apply overrides from a layout dictionary."""
        if not isinstance(config, dict):
            raise ValueError(f"Layout config must be an object, got {type(config).__name__}")

        unknown = set(config) - LAYOUT_KEYS
        if unknown:
            raise ValueError(f"Unknown layout keys: {sorted(unknown)}")

        if 'placard_size' in config:
            self.placard_size = _pair(config['placard_size'], 'placard_size', positive=True)
        if 'four_player_positions' in config:
            self.four_player_positions = _pairs(config['four_player_positions'], 'four_player_positions')
        if 'three_player_positions' in config:
            self.three_player_positions = _pairs(config['three_player_positions'], 'three_player_positions')
        if 'two_player_indices' in config:
            self.two_player_indices = _pair(config['two_player_indices'], 'two_player_indices')
        if 'victor_banner_position' in config:
            self.victor_banner_position = _pair(config['victor_banner_position'], 'victor_banner_position')
        if 'victor_banner_size' in config:
            self.victor_banner_size = _pair(config['victor_banner_size'], 'victor_banner_size', positive=True)

        for index in self.two_player_indices:
            if index >= len(self.four_player_positions):
                raise ValueError(
                    f"two_player_indices {self.two_player_indices} out of range for "
                    f"{len(self.four_player_positions)} four-player positions"
                )

    def to_dict(self) -> dict:
        """Convert layout to a JSON-serializable dictionary."""
        return {
            'placard_size': list(self.placard_size),
            'four_player_positions': [list(p) for p in self.four_player_positions],
            'three_player_positions': [list(p) for p in self.three_player_positions],
            'two_player_indices': list(self.two_player_indices),
            'victor_banner_position': list(self.victor_banner_position),
            'victor_banner_size': list(self.victor_banner_size),
        }


def default_layout() -> PodiumLayout:
    """Create a PodiumLayout with the built-in defaults. Never reads a file."""
    return PodiumLayout()
