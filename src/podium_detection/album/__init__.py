"""Album folder scanning and batch analysis."""

from .album_reader import (
    list_album_files,
    parse_album_timestamp,
    get_album_datetimes,
    fractional_hour
)
from .album_analysis import (
    PodiumResult,
    analyze_podium_file,
    analyze_album,
    group_by_victor
)

__all__ = [
    'list_album_files',
    'parse_album_timestamp',
    'get_album_datetimes',
    'fractional_hour',
    'PodiumResult',
    'analyze_podium_file',
    'analyze_album',
    'group_by_victor'
]
