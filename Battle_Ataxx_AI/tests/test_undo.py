"""Undo as an exact inverse of make_move, including passes and jump streaks."""

import pytest

from Battle_Ataxx_AI.Board import BLUE, EMPTY, RED, Board
from Battle_Ataxx_AI.Player import RandomPlayer


def snapshot(board):
    return (board.cells[:], board.whose_move, board.red_pieces, board.blue_pieces, board.num_jumps, board.winner)


@pytest.mark.parametrize("seed", [0, 1, 2, 7])
def test_undo_all_restores_cleared_board(seed):
    b = Board()
    start = b.clone()
    players = {RED: RandomPlayer(RED, seed=seed), BLUE: RandomPlayer(BLUE, seed=seed + 100)}

    for _ in range(60):
        if b.winner is not None:
            break
        before = snapshot(b)
        move = players[b.whose_move].next_move(b)
        b.make_move(move)
        # Each single step must also undo cleanly.
        b.undo()
        assert snapshot(b) == before
        b.make_move(move)

    for _ in range(len(b.history)):
        b.undo()
    assert b == start
    assert b.num_moves == 0 and b.num_jumps == 0
    assert b.winner is None
    assert b.history == []


def test_undo_covers_passes(build_board):
    b = build_board(
        red=["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"],
        blue=["a1"],
        to_move=BLUE,
    )
    start = b.clone()
    b.make_move("-")
    b.make_move("c3-d4")
    b.make_move("-")
    assert b.num_moves == 3
    assert b.whose_move is RED
    for _ in range(3):
        b.undo()
    assert b == start
    assert b.whose_move is BLUE


def test_undo_extend_restores_prior_jump_streak():
    b = Board()
    b.make_move("a1-a3")
    b.make_move("a7-a5")
    assert b.num_jumps == 2
    b.make_move("a3-a4")
    assert b.num_jumps == 0
    b.undo()
    assert b.num_jumps == 2
    b.undo()
    assert b.num_jumps == 1


def test_undo_restores_captured_pieces(build_board):
    b = build_board(red=["a3", "g7"], blue=["b1", "c1", "c2", "g1"])
    start = b.clone()
    b.make_move("a3-b2")
    assert b.blue_pieces == 1
    b.undo()
    assert b == start
    assert b.get("b", "1") is BLUE and b.get("b", "2") is EMPTY


def test_undo_clears_winner(build_board):
    b = build_board(red=["a1"], blue=["c2"])
    b.make_move("a1-b1")
    assert b.winner is RED
    b.undo()
    assert b.winner is None
    assert b.whose_move is RED
