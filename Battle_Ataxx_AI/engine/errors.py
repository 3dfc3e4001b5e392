"""Rules violations raised by the board and move parser."""


class GameError(Exception):
    """Base class for Ataxx rules errors."""


class IllegalMoveError(GameError, ValueError):
    """Move fails the legality check, or a pass while a move is available."""


class IllegalStateError(GameError, RuntimeError):
    """Operation not possible in the board's current state (undo with no history)."""


class IllegalPlacementError(GameError, ValueError):
    """Block placement after play started, on a blocked square, or mirrored onto a piece."""


class MalformedMoveTextError(GameError, ValueError):
    """Move text is neither '-' nor of the form 'c0r0-c1r1' on the 7x7 board."""
