"""
Podium album folder scanning.

The game saves every podium screenshot into an album folder, named after the
time it was taken (e.g. "12-15-16 18;03.png").
"""

from datetime import datetime
from pathlib import Path
from typing import List, Union

from ..processing.constants import ALBUM_EXTENSION, ALBUM_TIMESTAMP_FORMAT


def list_album_files(folder: Union[str, Path]) -> List[Path]:
    """
    List the screenshots in an album folder.

    Args:
        folder: Album folder path.

    Returns:
        Sorted list of .png file paths.

    Raises:
        FileNotFoundError: If the folder does not exist.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise FileNotFoundError(f"Album folder not found: {folder}")

    return sorted(
        p for p in folder.iterdir()
        if p.is_file() and p.suffix.lower() == ALBUM_EXTENSION
    )


def parse_album_timestamp(filename: Union[str, Path]) -> datetime:
    """
    Parse the capture time from a screenshot filename.

    Args:
        filename: File name or path, with or without the .png extension.

    Raises:
        ValueError: If the name does not follow the album naming scheme.
    """
    name = Path(filename).name
    if name.lower().endswith(ALBUM_EXTENSION):
        name = name[:-len(ALBUM_EXTENSION)]

    try:
        return datetime.strptime(name, ALBUM_TIMESTAMP_FORMAT)
    except ValueError as e:
        raise ValueError(f"Not an album screenshot name: {filename!r}") from e


def get_album_datetimes(folder: Union[str, Path]) -> List[datetime]:
    """Sorted capture times of every screenshot in the album."""
    return sorted(parse_album_timestamp(p) for p in list_album_files(folder))


def fractional_hour(dt: datetime) -> float:
    """Time of day as hours, e.g. 18:30 -> 18.5."""
    return (
        dt.hour
        + dt.minute / 60.0
        + dt.second / 3600.0
        + dt.microsecond / 3.6e9
    )
