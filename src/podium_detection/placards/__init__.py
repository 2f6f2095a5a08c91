"""Score placard detection module."""

from .placard_detector import (
    UndeterminedPlayerCountError,
    distinct_colors,
    is_score_placard,
    is_placard_at,
    placard_flags,
    resolve_player_count
)

__all__ = [
    'UndeterminedPlayerCountError',
    'distinct_colors',
    'is_score_placard',
    'is_placard_at',
    'placard_flags',
    'resolve_player_count'
]
