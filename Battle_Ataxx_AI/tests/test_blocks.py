"""Pre-game block placement with mirror symmetry."""

import pytest

from Battle_Ataxx_AI.Board import BLOCKED, EMPTY, Board
from Battle_Ataxx_AI.engine.errors import IllegalPlacementError


def test_block_is_mirrored_four_ways():
    b = Board()
    b.set_block("c3")
    for name in ("c3", "e3", "c5", "e5"):
        assert b.get(*name) is BLOCKED
    assert b.total_open() == 41


def test_center_block_covers_one_square():
    b = Board()
    b.set_block("d", "4")
    assert b.get("d", "4") is BLOCKED
    assert b.total_open() == 44


def test_middle_row_block_covers_two_squares():
    b = Board()
    b.set_block("b4")
    assert b.get("b", "4") is BLOCKED and b.get("f", "4") is BLOCKED
    assert b.total_open() == 43


def test_block_on_piece_rejected():
    b = Board()
    assert not b.legal_block("a", "1")
    with pytest.raises(IllegalPlacementError):
        b.set_block("g7")


def test_block_whose_reflection_holds_piece_rejected(build_board):
    b = build_board(red=["a1", "c3"], blue=["g7"])
    assert not b.legal_block("e", "5")
    with pytest.raises(IllegalPlacementError):
        b.set_block("e5")
    assert b.get("e", "5") is EMPTY


def test_block_twice_rejected():
    b = Board()
    b.set_block("c3")
    with pytest.raises(IllegalPlacementError):
        b.set_block("e5")


def test_block_after_first_move_rejected():
    b = Board()
    b.make_move("a1-a2")
    assert not b.legal_block("c", "3")
    with pytest.raises(IllegalPlacementError):
        b.set_block("c3")


def test_block_off_board_or_bad_text_rejected():
    b = Board()
    assert not b.legal_block("h", "1")
    assert not b.legal_block("c33")
    assert not b.legal_block(None)
    assert b.legal_block("c3")
    with pytest.raises(IllegalPlacementError):
        b.set_block("c33")


def test_blocks_survive_moves_and_undo():
    b = Board()
    b.set_block("b2")
    b.make_move("a1-a2")
    b.undo()
    assert b.get("b", "2") is BLOCKED
    assert b.get("f", "6") is BLOCKED


def test_walling_in_every_corner_ends_the_game_as_a_draw():
    b = Board()
    for name in ("a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"):
        b.set_block(name)
    assert not b.can_move(b.whose_move)
    assert b.winner is EMPTY
