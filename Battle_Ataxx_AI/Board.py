"""Ataxx board: legality, captures, undoable moves, blocks, and end-of-game detection.

Squares live in a flat list over an 11x11 grid: the real 7x7 board plus two
layers of permanently BLOCKED border squares on every side, so looking two
squares away from any real square never leaves the list and off-board squares
are rejected by the ordinary "destination must be empty" rule.
"""

import logging

from .Move import Move, PASS
from .engine import move_generator, squares
from .engine.errors import IllegalMoveError, IllegalPlacementError, IllegalStateError
from .engine.squares import EXTENDED_SIDE, PieceColor

LOGGER = logging.getLogger(__name__)

RED = PieceColor.RED
BLUE = PieceColor.BLUE
EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED

# Consecutive jumps (no intervening extend) that end the game.
JUMP_LIMIT = 25

START_RED = (("a", "1"), ("g", "7"))
START_BLUE = (("a", "7"), ("g", "1"))


def _nop(board):
    pass


class Board:
    def __init__(self, notifier=None):
        self.cells = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        self._notifier = notifier or _nop
        self.clear()

    def clear(self):
        """Reset to the starting position: no blocks, Red to move."""
        for sq in squares.REAL_SQUARES:
            self.cells[sq] = EMPTY
        for col, row in START_RED:
            self.cells[squares.index(col, row)] = RED
        for col, row in START_BLUE:
            self.cells[squares.index(col, row)] = BLUE
        self._whose_move = RED
        self._num_pieces = {RED: 2, BLUE: 2}
        self._num_moves = 0
        self._num_jumps = 0
        self._winner = None
        self.history = []
        # Undo log: (square, prior contents) records, plus one
        # (record count, jump streak before the move) entry per move.
        self._undo_records = []
        self._undo_frames = []
        self._announce()

    def clone(self):
        """Copy of the position with empty history and a no-op notifier (search scratch space)."""
        new_board = Board.__new__(Board)
        new_board.cells = self.cells[:]
        new_board._notifier = _nop
        new_board._whose_move = self._whose_move
        new_board._num_pieces = dict(self._num_pieces)
        new_board._num_moves = 0
        new_board._num_jumps = self._num_jumps
        new_board._winner = self._winner
        new_board.history = []
        new_board._undo_records = []
        new_board._undo_frames = []
        return new_board

    # --- queries -------------------------------------------------------

    def __getitem__(self, sq):
        return self.cells[sq]

    def get(self, col, row):
        """Contents of COL ROW; border squares (e.g. 'a'-1) read as BLOCKED."""
        return self.cells[squares.index(col, row)]

    @property
    def winner(self):
        """RED, BLUE, EMPTY for a draw, or None while the game is live."""
        return self._winner

    @property
    def whose_move(self):
        return self._whose_move

    @property
    def red_pieces(self):
        return self._num_pieces[RED]

    @property
    def blue_pieces(self):
        return self._num_pieces[BLUE]

    def num_pieces(self, color):
        return self._num_pieces[color]

    @property
    def num_moves(self):
        """Moves and passes made since the last clear."""
        return self._num_moves

    @property
    def num_jumps(self):
        """Consecutive jumps since the last extend (or the start of the game)."""
        return self._num_jumps

    @property
    def all_moves(self):
        return list(self.history)

    def total_open(self):
        return sum(1 for sq in squares.REAL_SQUARES if self.cells[sq] is EMPTY)

    # --- legality ------------------------------------------------------

    def is_legal_move(self, move, color=None):
        """
        True iff non-pass MOVE may be played by COLOR (default: the side to move).
        Pass legality is handled by make_move: a pass is legal only when stuck.
        """
        if move is None or move.is_pass:
            return False
        if color is None:
            color = self._whose_move
        if not color.is_piece():
            return False
        if move.col_distance > 2 or move.row_distance > 2:
            return False
        if not squares.on_board(move.col1, move.row1):
            return False
        if not squares.on_board(move.col0, move.row0):
            return False
        dest = self.cells[move.to_index]
        if dest is BLOCKED:
            return False
        if self.cells[move.from_index] is not color:
            return False
        return dest is EMPTY

    def can_move(self, color):
        """True iff COLOR has any legal move, whoever's turn it is."""
        return move_generator.has_legal_move(self, color)

    def legal_moves(self, color=None):
        return move_generator.legal_moves(self, self._whose_move if color is None else color)

    # --- mutation ------------------------------------------------------

    def make_move(self, move):
        """Play MOVE (a Move or move text) for the side to move."""
        if self._winner is not None:
            raise IllegalMoveError(f"game is over (winner: {self._winner})")
        if isinstance(move, str):
            move = Move.parse(move)
        if move is None:
            raise IllegalMoveError("no move given")

        if move.is_pass:
            if self.can_move(self._whose_move):
                raise IllegalMoveError(f"{self._whose_move} has a legal move and may not pass")
            self.history.append(move)
            self._undo_frames.append((0, self._num_jumps))
            self._num_moves += 1
            self._whose_move = self._whose_move.opposite()
            self._announce()
            return

        if not self.is_legal_move(move):
            raise IllegalMoveError(f"illegal move: {move}")

        mover = self._whose_move
        opponent = mover.opposite()
        src = move.from_index
        dst = move.to_index

        self.history.append(move)
        start = len(self._undo_records)
        self._undo_records.append((src, self.cells[src]))
        self._undo_records.append((dst, self.cells[dst]))
        jumps_before = self._num_jumps

        for sq in squares.surrounding(dst):
            if self.cells[sq] is opponent:
                self._undo_records.append((sq, opponent))
                self.cells[sq] = mover
                self._num_pieces[mover] += 1
                self._num_pieces[opponent] -= 1

        self.cells[dst] = mover
        if move.is_jump:
            self._num_jumps += 1
            self.cells[src] = EMPTY
        else:
            self._num_jumps = 0
            self._num_pieces[mover] += 1

        self._undo_frames.append((len(self._undo_records) - start, jumps_before))
        self._check_game_over()
        self._num_moves += 1
        self._whose_move = opponent
        self._announce()

    def undo(self):
        """Take back the last move or pass."""
        if not self.history:
            raise IllegalStateError("no moves to undo")
        count, jumps_before = self._undo_frames.pop()
        for _ in range(count):
            sq, prior = self._undo_records.pop()
            current = self.cells[sq]
            if current.is_piece():
                self._num_pieces[current] -= 1
            if prior.is_piece():
                self._num_pieces[prior] += 1
            self.cells[sq] = prior
        self.history.pop()
        self._num_jumps = jumps_before
        self._num_moves -= 1
        self._winner = None
        self._whose_move = self._whose_move.opposite()
        self._announce()

    def _check_game_over(self):
        red, blue = self.red_pieces, self.blue_pieces
        if red == 0:
            self._winner = BLUE
        elif blue == 0:
            self._winner = RED
        elif self._num_jumps >= JUMP_LIMIT:
            self._winner = self._leader(red, blue)
        elif not self.can_move(RED) and not self.can_move(BLUE):
            self._winner = self._leader(red, blue)
        else:
            return
        LOGGER.debug("game over: winner=%s red=%d blue=%d jumps=%d", self._winner, red, blue, self._num_jumps)

    @staticmethod
    def _leader(red, blue):
        if red > blue:
            return RED
        if blue > red:
            return BLUE
        return EMPTY

    # --- blocks --------------------------------------------------------

    def legal_block(self, col, row=None):
        """True iff a block may go on COL ROW (or square text such as 'c3')."""
        if row is None:
            if not isinstance(col, str) or len(col) != 2:
                return False
            col, row = col[0], col[1]
        if self._num_moves > 0 or not squares.on_board(col, row):
            return False
        if self.get(col, row) is BLOCKED:
            return False
        return not any(self.get(c, r).is_piece() for c, r in squares.reflections(col, row))

    def set_block(self, col, row=None):
        """Block COL ROW and its reflections across the middle column and/or row."""
        if row is None:
            col, row = self._split_square(col)
        if not self.legal_block(col, row):
            raise IllegalPlacementError(f"illegal block placement: {col}{row}")
        for c, r in squares.reflections(col, row):
            sq = squares.index(c, r)
            if self.cells[sq] is not BLOCKED:
                self.cells[sq] = BLOCKED
        LOGGER.debug("blocked %s%s and reflections", col, row)
        if not self.can_move(RED) and not self.can_move(BLUE):
            self._winner = self._leader(self.red_pieces, self.blue_pieces)
        self._announce()

    @staticmethod
    def _split_square(text):
        if not isinstance(text, str) or len(text) != 2:
            raise IllegalPlacementError(f"bad square: {text!r}")
        return text[0], text[1]

    # --- notification / display ---------------------------------------

    def set_notifier(self, notifier):
        """Call NOTIFIER(board) after every change of state; None disables it."""
        self._notifier = notifier or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.cells == other.cells
            and self._whose_move is other._whose_move
            and self._num_pieces == other._num_pieces
        )

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def to_string(self, legend=False):
        """Text picture of the board, rank 7 at the top; LEGEND adds rank and file labels."""
        out = []
        for row in reversed(squares.ROWS):
            prefix = row if legend else ""
            cells = "".join(" " + self.get(col, row).symbol for col in squares.COLUMNS)
            out.append(f"{prefix} {cells}\n")
        if legend:
            out.append("   a b c d e f g")
        return "".join(out)
