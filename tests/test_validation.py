import pytest

from raycube.validation import (
    count_cols,
    count_rows_col,
    fill_1s,
    has_correct_symbols,
    has_one_player,
    has_valid_textures,
    is_valid,
    is_valid_char,
    open_horizontal,
    open_vertical,
)

CLOSED_MAP = [
    "111111",
    "100001",
    "10N001",
    "111111",
]

IRREGULAR_MAP = [
    "  1111",
    "111001",
    "1000N1",
    "111111",
]


@pytest.fixture
def texture_paths(tmp_path):
    paths = []
    for name in ("north.xpm", "east.xpm", "south.xpm", "west.xpm"):
        path = tmp_path / name
        path.write_text("data")
        paths.append(str(path))
    return paths


@pytest.mark.parametrize("c", list("01NESW "))
def test_is_valid_char_accepts(c):
    assert is_valid_char(c) is True


@pytest.mark.parametrize("c", ["2", "X", "n", "\t", ""])
def test_is_valid_char_rejects(c):
    assert is_valid_char(c) is False


def test_count_cols_is_longest_row():
    assert count_cols(["11", "11111", "111"]) == len("11111")
    assert count_cols([]) == 0


def test_count_rows_col_full_column():
    assert count_rows_col(CLOSED_MAP, 0) == len(CLOSED_MAP)


def test_count_rows_col_stops_at_short_row():
    rows = ["1111", "11", "1111"]
    assert count_rows_col(rows, 3) == 1


def test_count_rows_col_stops_at_invalid_char():
    rows = ["111", "1X1", "111"]
    assert count_rows_col(rows, 1) == 1


def test_count_rows_col_negative_column():
    assert count_rows_col(CLOSED_MAP, -1) == 0


def test_open_horizontal_closed():
    assert open_horizontal(CLOSED_MAP) is False
    assert open_horizontal(IRREGULAR_MAP) is False


def test_open_horizontal_open_end():
    assert open_horizontal(["111", "100", "111"]) is True


def test_open_horizontal_open_start_after_spaces():
    assert open_horizontal(["111", "  01", "111"]) is True


def test_open_vertical_closed():
    assert open_vertical(CLOSED_MAP) is False
    assert open_vertical(IRREGULAR_MAP) is False


def test_open_vertical_open_top():
    assert open_vertical(["1101", "1001", "1111"]) is True


def test_open_vertical_open_bottom():
    assert open_vertical(["1111", "1001", "1101"]) is True


def test_open_vertical_short_top_row():
    assert open_vertical(["11", "1001", "1111"]) is True


def test_has_correct_symbols():
    assert has_correct_symbols(CLOSED_MAP) is True
    assert has_correct_symbols(["111", "1X1", "111"]) is False
    assert has_correct_symbols(["111", "   ", "111"]) is False
    assert has_correct_symbols(["111", "", "111"]) is False


def test_has_one_player():
    assert has_one_player(CLOSED_MAP) is True
    assert has_one_player(["111", "101", "111"]) is False
    assert has_one_player(["1111", "1NS1", "1111"]) is False


def test_has_valid_textures(texture_paths, tmp_path):
    assert has_valid_textures(texture_paths) is True
    missing = texture_paths[:3] + [str(tmp_path / "missing.xpm")]
    assert has_valid_textures(missing) is False
    assert has_valid_textures(texture_paths[:3] + [None]) is False


def test_is_valid_accepts_good_map(texture_paths):
    assert is_valid(CLOSED_MAP, texture_paths) is True
    assert is_valid(IRREGULAR_MAP, texture_paths) is True


@pytest.mark.parametrize(
    "rows",
    [
        ["111", "101", "111"],
        ["111", "1N0", "111"],
        ["111", "1N1", "1X1", "111"],
        ["1101", "1N01", "1111"],
    ],
)
def test_is_valid_rejects_bad_maps(rows, texture_paths):
    assert is_valid(rows, texture_paths) is False


def test_is_valid_rejects_missing_texture(tmp_path, texture_paths):
    paths = texture_paths[:3] + [str(tmp_path / "nope.xpm")]
    assert is_valid(CLOSED_MAP, paths) is False


def test_fill_1s_example():
    assert fill_1s(["  1 0 1  "]) == ["  11101  "]


def test_fill_1s_invariants():
    rows = ["  1 1  1", "1 0 N 1", "1111", "   1   "]
    filled = fill_1s(rows)
    assert len(filled) == len(rows)
    for before, after in zip(rows, filled):
        assert len(after) == len(before)
        assert " " not in after.strip(" ")
        assert after.lstrip(" ") != "" or before.strip(" ") == ""
        assert len(before) - len(before.lstrip(" ")) == len(after) - len(after.lstrip(" "))
        assert len(before.rstrip(" ")) == len(after.rstrip(" "))
        for b, a in zip(before, after):
            assert a == b or (b == " " and a == "1")


def test_fill_1s_leaves_closed_map_unchanged():
    assert fill_1s(CLOSED_MAP) == CLOSED_MAP


def test_fill_1s_does_not_modify_input():
    rows = ["1 1"]
    fill_1s(rows)
    assert rows == ["1 1"]