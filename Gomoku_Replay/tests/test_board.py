"""Sanity tests for immutable Board snapshots and placement validity."""

import pytest

from Gomoku_Replay.Board import Board, Mark


def test_place_returns_new_board_and_leaves_original_untouched():
    b = Board(size=15)
    b2 = b.place(7, 7, Mark.X)
    assert b2 is not b
    assert b.get(7, 7) is None
    assert b2.get(7, 7) is Mark.X
    assert b2[7][7] is Mark.X
    assert b.marks_count() == 0
    assert b2.marks_count() == 1
    assert b2.diff(b) == [(7, 7, None, Mark.X)]


def test_place_rejects_occupied_and_out_of_bounds():
    b = Board(size=5).place(2, 2, Mark.O)
    with pytest.raises(ValueError):
        b.place(2, 2, Mark.X)
    with pytest.raises(ValueError):
        b.place(5, 0, Mark.X)
    with pytest.raises(ValueError):
        b.place(0, -1, Mark.X)
    with pytest.raises(ValueError):
        b.place(0, 0, "X")


def test_is_empty_is_false_off_board():
    b = Board(size=5)
    assert b.is_empty(0, 0)
    assert not b.is_empty(-1, 0)
    assert not b.is_empty(0, 5)


def test_equal_boards_compare_and_hash_equal():
    a = Board(size=5).place(1, 2, Mark.X)
    b = Board(size=5).place(1, 2, Mark.X)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Board(size=5)
    assert Board(size=5) != Board(size=6)


def test_to_text_renders_marks_and_dots():
    b = Board(size=3).place(0, 0, Mark.X).place(1, 2, Mark.O)
    assert b.to_text() == "X..\n..O\n..."


def test_cells_must_be_square():
    with pytest.raises(ValueError):
        Board(3, [[None] * 3, [None] * 3])


def test_rotation_moves_corner_clockwise():
    b = Board(size=5).place(0, 0, Mark.X)
    r = b.rotated()
    assert r.get(0, 4) is Mark.X
    assert r.rotated().rotated().rotated() == b
    assert b.mirrored().get(0, 4) is Mark.X
    assert b.transform(0) == b


def test_transform_rejects_unknown_symmetry_id():
    b = Board(size=5)
    for bad in (-1, 8):
        with pytest.raises(ValueError, match="symmetry_id"):
            b.transform(bad)


def test_mark_alternates_by_move_parity():
    assert Mark.for_move(0) is Mark.X
    assert Mark.for_move(1) is Mark.O
    assert Mark.for_move(2) is Mark.X
    assert str(Mark.O) == "O"
