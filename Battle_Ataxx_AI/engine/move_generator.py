"""Legal move enumeration for either color, independent of whose turn it is."""

from ..Move import Move
from .squares import REAL_SQUARES, PieceColor, reachable, square_name

_NAMES = {sq: square_name(sq) for sq in REAL_SQUARES}


def legal_moves(board, color):
    """
    Return every legal non-pass move for `color` on `board`.

    Sources are scanned in row-major order and destinations in row-major order
    around each source, so the result is deterministic. The destination test is
    the same one Board.is_legal_move applies: an empty square within two cells
    (border squares read as BLOCKED). Returns [] when `color` cannot move.
    """
    moves = []
    if not color.is_piece():
        return moves
    for src in REAL_SQUARES:
        if board[src] is not color:
            continue
        c0, r0 = _NAMES[src]
        for dst in reachable(src):
            if board[dst] is PieceColor.EMPTY:
                c1, r1 = _NAMES[dst]
                moves.append(Move(c0, r0, c1, r1))
    return moves


def has_legal_move(board, color):
    """True iff `color` owns a piece with an empty square within two cells."""
    if not color.is_piece():
        return False
    for src in REAL_SQUARES:
        if board[src] is not color:
            continue
        for dst in reachable(src):
            if board[dst] is PieceColor.EMPTY:
                return True
    return False


def destinations(moves):
    """Destination square indices of `moves`, in order, duplicates kept."""
    return [move.to_index for move in moves]
