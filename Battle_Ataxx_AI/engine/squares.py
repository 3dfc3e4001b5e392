"""Square indexing on the border-padded 11x11 grid and piece colors."""

from enum import Enum

SIDE = 7
BORDER = 2
# Two blocked layers on every side, so any offset within two cells stays in range.
EXTENDED_SIDE = SIDE + 2 * BORDER

COLUMNS = "abcdefg"
ROWS = "1234567"

ADJACENT_OFFSETS = tuple(
    (dc, dr) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dc, dr) != (0, 0)
)
REACH_OFFSETS = tuple(
    (dc, dr) for dr in range(-2, 3) for dc in range(-2, 3) if (dc, dr) != (0, 0)
)


class PieceColor(Enum):
    """Contents of a square. EMPTY doubles as the draw marker for a finished game."""

    EMPTY = "Empty"
    RED = "Red"
    BLUE = "Blue"
    BLOCKED = "Blocked"

    def opposite(self):
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self):
        return self is PieceColor.RED or self is PieceColor.BLUE

    @property
    def symbol(self):
        return _SYMBOLS[self]

    def __str__(self):
        return self.value


_SYMBOLS = {
    PieceColor.EMPTY: "-",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.BLOCKED: "X",
}


def index(col, row):
    """Linearized index of square COL ROW, border squares included."""
    return (ord(row) - ord("1") + BORDER) * EXTENDED_SIDE + (ord(col) - ord("a") + BORDER)


def neighbor(sq, dc, dr):
    """Index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def on_board(col, row):
    if not isinstance(col, str) or not isinstance(row, str):
        return False
    return len(col) == 1 and len(row) == 1 and col in COLUMNS and row in ROWS


def surrounding(sq):
    """The 8 squares touching SQ (the capture radius)."""
    return [neighbor(sq, dc, dr) for dc, dr in ADJACENT_OFFSETS]


def reachable(sq):
    """The 24 squares within two columns and rows of SQ (the move radius)."""
    return [neighbor(sq, dc, dr) for dc, dr in REACH_OFFSETS]


def square_name(sq):
    """Inverse of index() for squares on the real board, e.g. 'c3'."""
    r, c = divmod(sq, EXTENDED_SIDE)
    c -= BORDER
    r -= BORDER
    if not (0 <= c < SIDE and 0 <= r < SIDE):
        raise ValueError(f"square {sq} is in the border region")
    return COLUMNS[c] + ROWS[r]


def is_edge(sq):
    """True if SQ lies on the outermost ring of the real board."""
    r, c = divmod(sq, EXTENDED_SIDE)
    return c in (BORDER, BORDER + SIDE - 1) or r in (BORDER, BORDER + SIDE - 1)


def reflections(col, row):
    """COL ROW and its mirrors across the middle column, middle row and both."""
    mirror_col = COLUMNS[SIDE - 1 - COLUMNS.index(col)]
    mirror_row = ROWS[SIDE - 1 - ROWS.index(row)]
    return [(col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)]


# Row-major: rank 1 first, files a..g within a rank.
REAL_SQUARES = tuple(index(c, r) for r in ROWS for c in COLUMNS)
