"""
Album scanning, timestamps and batch analysis.

Run:
  pytest tests/test_album.py
"""

from datetime import datetime

import pytest

from podium_detection.album import (
    analyze_album,
    analyze_podium_file,
    fractional_hour,
    get_album_datetimes,
    group_by_victor,
    list_album_files,
    parse_album_timestamp,
)
from podium_detection.placards import UndeterminedPlayerCountError

from podium_fixtures import TEXT_A, TEXT_B, make_banner, make_podium, obscure, save_png


def _build_album(folder):
    save_png(make_podium(4, banner=make_banner(text=TEXT_A), seed=1), folder / "12-15-16 18;50.png")
    save_png(make_podium(2, banner=obscure(make_banner(text=TEXT_A)), seed=2), folder / "10-18-16 17;45.png")
    save_png(make_podium(3, banner=make_banner((252, 198, 162), (0, 0, 3), text=TEXT_B), seed=3),
             folder / "11-22-19 18;51.png")
    save_png(make_podium(None, seed=4), folder / "01-01-20 10;00.png")
    (folder / "02-02-20 10;00.png").write_bytes(b"truncated")
    (folder / "notes.txt").write_text("not a screenshot")


def test_parse_album_timestamp() -> None:
    assert parse_album_timestamp("12-15-16 18;03.png") == datetime(2016, 12, 15, 18, 3)
    assert parse_album_timestamp("04-25-20 21;01") == datetime(2020, 4, 25, 21, 1)
    assert parse_album_timestamp("09-09-18 1;11.png") == datetime(2018, 9, 9, 1, 11)


@pytest.mark.parametrize("name", ["screenshot.png", "13-40-16 18;03.png", "12-15-16 18:03.png", ""])
def test_parse_album_timestamp_rejects_other_names(name) -> None:
    with pytest.raises(ValueError):
        parse_album_timestamp(name)


def test_list_album_files(tmp_path) -> None:
    _build_album(tmp_path)
    names = [p.name for p in list_album_files(tmp_path)]
    assert names == sorted(names)
    assert "notes.txt" not in names
    assert len(names) == 5


def test_list_album_files_missing_folder(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list_album_files(tmp_path / "nope")


def test_get_album_datetimes_sorted(tmp_path) -> None:
    _build_album(tmp_path)
    datetimes = get_album_datetimes(tmp_path)
    assert datetimes == sorted(datetimes)
    assert datetimes[0] == datetime(2016, 10, 18, 17, 45)
    assert datetimes[-1] == datetime(2020, 2, 2, 10, 0)


def test_fractional_hour() -> None:
    assert fractional_hour(datetime(2020, 1, 1, 18, 30)) == pytest.approx(18.5)
    assert fractional_hour(datetime(2020, 1, 1, 0, 0, 36)) == pytest.approx(0.01)
    assert fractional_hour(datetime(2020, 1, 1, 23, 59, 59, 999999)) < 24.0


def test_analyze_podium_file(tmp_path) -> None:
    _build_album(tmp_path)
    result = analyze_podium_file(tmp_path / "12-15-16 18;50.png")
    assert result.player_count == 4
    assert result.timestamp == datetime(2016, 12, 15, 18, 50)
    assert result.fingerprint.shape == (23, 179)
    assert result.to_dict()["player_count"] == 4


def test_analyze_podium_file_undetermined(tmp_path) -> None:
    _build_album(tmp_path)
    with pytest.raises(UndeterminedPlayerCountError):
        analyze_podium_file(tmp_path / "01-01-20 10;00.png")


def test_analyze_album_skips_bad_images(tmp_path, capsys) -> None:
    _build_album(tmp_path)
    results = analyze_album(tmp_path)

    assert [r.path.name for r in results] == [
        "10-18-16 17;45.png",
        "12-15-16 18;50.png",
        "11-22-19 18;51.png",
    ]
    assert [r.player_count for r in results] == [2, 4, 3]

    out = capsys.readouterr().out
    assert "Found 5 files" in out
    assert "Skipping 01-01-20 10;00.png" in out
    assert "Skipping 02-02-20 10;00.png" in out


def test_analyze_album_quiet(tmp_path, capsys) -> None:
    _build_album(tmp_path)
    analyze_album(tmp_path, verbose=False)
    assert capsys.readouterr().out == ""


def test_group_by_victor(tmp_path) -> None:
    _build_album(tmp_path)
    results = analyze_album(tmp_path, verbose=False)
    groups = group_by_victor(results)

    assert len(groups) == 2
    assert [r.path.name for r in groups[0]] == ["10-18-16 17;45.png", "12-15-16 18;50.png"]
    assert [r.path.name for r in groups[1]] == ["11-22-19 18;51.png"]


def test_group_by_victor_empty() -> None:
    assert group_by_victor([]) == []
