"""Unit tests for cell addressing and group membership."""

import pytest

from src.sudoku.cells import ALL_KEYS, all_groups, box_keys, decode, key_of


def test_key_of_uses_column_letter_and_row_digit():
    assert key_of(0, 0) == "a0"
    assert key_of(8, 8) == "i8"
    assert key_of(2, 5) == "c5"


def test_decode_inverts_key_of_over_whole_grid():
    keys = set()
    for col in range(9):
        for row in range(9):
            key = key_of(col, row)
            assert decode(key) == (col, row)
            keys.add(key)
    assert len(keys) == 81


@pytest.mark.parametrize("col,row", [(-1, 0), (0, 9), (9, 0), (3, -2)])
def test_key_of_rejects_out_of_range(col, row):
    with pytest.raises(ValueError):
        key_of(col, row)


@pytest.mark.parametrize("key", ["", "a", "j0", "a9", "A0", "a00", "0a"])
def test_decode_rejects_malformed_keys(key):
    with pytest.raises(ValueError):
        decode(key)


def test_all_keys_is_row_major():
    assert len(ALL_KEYS) == 81
    assert ALL_KEYS[:3] == ["a0", "b0", "c0"]
    assert ALL_KEYS[9] == "a1"


def test_groups_partition_cells_per_kind():
    groups = all_groups()
    assert len(groups) == 27
    for start in (0, 9, 18):
        kind = groups[start:start + 9]
        assert all(len(group) == 9 for group in kind)
        members = [key for group in kind for key in group]
        assert sorted(members) == sorted(ALL_KEYS)


def test_box_keys_cover_three_by_three_block():
    assert box_keys(1, 2) == ["g3", "h3", "i3", "g4", "h4", "i4", "g5", "h5", "i5"]
