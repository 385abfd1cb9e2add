import pytest

from slidepuzzle.field import EmptyCellError, Field, FieldError
from slidepuzzle.mapfile import map_exists, map_filename, read_map
from slidepuzzle.settings import Meta

SAMPLE = [
    "#CREATOR tester",
    "#EMPTY _",
    "",
    "REM current",
    "1;2",
    "_;3",
    "REM solved",
    "1; 2",
    "3; _",
    "REM desc",
    "a small map",
]


def test_read_map_sample():
    meta = read_map(SAMPLE, Meta())
    assert meta.creator == "tester"
    assert meta.empty_cell == "_"
    assert meta.current == Field([["1", "2"], ["_", "3"]])
    assert meta.solved == Field([["1", "2"], ["3", "_"]])


def test_read_map_keeps_other_meta():
    meta = Meta(backward_mode=True, n=4)
    read_map(SAMPLE, meta)
    assert meta.backward_mode is True
    assert meta.n == 4


def test_read_map_missing_empty_cell():
    lines = ["#EMPTY X" if line == "#EMPTY _" else line for line in SAMPLE]
    with pytest.raises(EmptyCellError):
        read_map(lines, Meta())


def test_read_map_empty_missing_from_current_only():
    lines = ["#EMPTY _", "REM current", "1;2", "3;4", "REM solved", "1;2", "3;_"]
    with pytest.raises(EmptyCellError):
        read_map(lines, Meta())


def test_read_map_not_square():
    lines = ["#EMPTY _", "REM current", "1;2;3", "_;4;5", "REM solved", "1;2", "3;_"]
    with pytest.raises(FieldError):
        read_map(lines, Meta())


def test_read_map_without_boards():
    with pytest.raises(FieldError):
        read_map(["#EMPTY _"], Meta())


def test_read_map_from_file(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    with open(path, encoding="utf-8") as handle:
        meta = read_map(handle, Meta())
    assert meta.solved.find(meta.empty_cell) == (1, 1)
    assert meta.current.find(meta.empty_cell) == (1, 0)


def test_map_filename_adds_extension():
    assert map_filename("level") == "level.txt"


def test_map_filename_keeps_extension():
    assert map_filename("level.txt") == "level.txt"


def test_map_exists(tmp_path):
    (tmp_path / "level.txt").write_text("#EMPTY _\n", encoding="utf-8")
    assert map_exists("level", str(tmp_path)) is True
    assert map_exists("level.txt", str(tmp_path)) is True
    assert map_exists("other", str(tmp_path)) is False