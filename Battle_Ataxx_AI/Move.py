"""Move value type: a pass or a transfer between two squares, with text parsing."""

import re
from dataclasses import dataclass
from typing import Optional

from .engine import squares
from .engine.errors import MalformedMoveTextError


_MOVE_RE = re.compile(r"^([a-g])([1-7])-([a-g])([1-7])$")
PASS_TEXT = "-"


@dataclass(frozen=True)
class Move:
    """A move from col0 row0 to col1 row1; all four fields are None for a pass."""

    col0: Optional[str] = None
    row0: Optional[str] = None
    col1: Optional[str] = None
    row1: Optional[str] = None

    @classmethod
    def parse(cls, text):
        """Parse '-' or 'c0r0-c1r1'; raise MalformedMoveTextError otherwise."""
        if not isinstance(text, str):
            raise MalformedMoveTextError(f"move text must be a string, got {type(text).__name__}")
        cleaned = text.strip()
        if cleaned == PASS_TEXT:
            return PASS
        match = _MOVE_RE.match(cleaned)
        if match is None:
            raise MalformedMoveTextError(f"malformed move: {text!r}")
        return cls(*match.groups())

    @property
    def is_pass(self):
        return self.col0 is None

    @property
    def col_distance(self):
        return abs(ord(self.col1) - ord(self.col0))

    @property
    def row_distance(self):
        return abs(ord(self.row1) - ord(self.row0))

    @property
    def is_extend(self):
        return not self.is_pass and max(self.col_distance, self.row_distance) == 1

    @property
    def is_jump(self):
        return not self.is_pass and max(self.col_distance, self.row_distance) == 2

    @property
    def from_index(self):
        return squares.index(self.col0, self.row0)

    @property
    def to_index(self):
        return squares.index(self.col1, self.row1)

    def __str__(self):
        if self.is_pass:
            return PASS_TEXT
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


PASS = Move()
Move.PASS = PASS
