"""Shared fixtures: build arbitrary positions without replaying moves."""

import pytest

from Battle_Ataxx_AI.Board import BLOCKED, BLUE, EMPTY, RED, Board
from Battle_Ataxx_AI.engine import squares


def _build_board(red=(), blue=(), blocks=(), to_move=RED):
    board = Board()
    for sq in squares.REAL_SQUARES:
        board.cells[sq] = EMPTY
    for name in red:
        board.cells[squares.index(*name)] = RED
    for name in blue:
        board.cells[squares.index(*name)] = BLUE
    for name in blocks:
        board.cells[squares.index(*name)] = BLOCKED
    board._num_pieces = {RED: len(red), BLUE: len(blue)}
    board._whose_move = to_move
    return board


@pytest.fixture
def build_board():
    return _build_board
