from slidepuzzle.settings import Control, Meta, load_settings, parse_settings


def test_control_str():
    assert str(Meta().control) == "COMMON"
    assert str(parse_settings(["ctrl >"], Meta()).control) == "ARROW"
    assert str(parse_settings(["ctrl wasd"], Meta()).control) == "WASD"


def test_meta_defaults():
    meta = Meta()
    assert meta.control is Control.COMMON
    assert meta.n == 3
    assert meta.backward_mode is False


def test_ctrl_wasd():
    assert parse_settings(["ctrl wasd"], Meta()).control is Control.WASD


def test_ctrl_arrow():
    assert parse_settings(["ctrl >"], Meta()).control is Control.ARROW


def test_dim_sets_size():
    assert parse_settings(["dim 4"], Meta()).n == 4


def test_dim_reads_single_digit():
    assert parse_settings(["dim 12"], Meta()).n == 1


def test_dim_non_digit_is_ignored():
    assert parse_settings(["dim x5"], Meta()).n == 3


def test_comment_and_blank_lines_skipped():
    meta = parse_settings(["", "REM dim 5", "REM ctrl wasd"], Meta())
    assert meta.n == 3
    assert meta.control is Control.COMMON


def test_unknown_ctrl_stops_reading():
    meta = parse_settings(["ctrl mouse", "dim 5"], Meta())
    assert meta.n == 3
    assert meta.control is Control.COMMON


def test_lines_with_newlines():
    meta = parse_settings(["ctrl wasd\n", "dim 5\n"], Meta())
    assert meta.control is Control.WASD
    assert meta.n == 5


def test_load_settings_missing_file(tmp_path):
    meta = load_settings(Meta(), str(tmp_path / "absent.txt"))
    assert meta == Meta()


def test_load_settings_from_file(tmp_path):
    config = tmp_path / "config.txt"
    config.write_text("REM settings\nctrl >\ndim 4\n", encoding="utf-8")
    meta = load_settings(Meta(), str(config))
    assert meta.control is Control.ARROW
    assert meta.n == 4