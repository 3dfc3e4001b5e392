"""Battle_Ataxx_AI package exports."""

from .Board import Board, JUMP_LIMIT
from .Move import Move, PASS
from .Ataxxgame import Ataxxgame
from .Player import Player, AIPlayer, RandomPlayer, GreedyPlayer
from .engine.squares import PieceColor
from .engine.errors import (
    GameError,
    IllegalMoveError,
    IllegalPlacementError,
    IllegalStateError,
    MalformedMoveTextError,
)

# Subpackages for rules helpers, AI search, and utilities
from . import ai, engine, utils

__all__ = [
    "Board",
    "JUMP_LIMIT",
    "Move",
    "PASS",
    "Ataxxgame",
    "Player",
    "AIPlayer",
    "RandomPlayer",
    "GreedyPlayer",
    "PieceColor",
    "GameError",
    "IllegalMoveError",
    "IllegalPlacementError",
    "IllegalStateError",
    "MalformedMoveTextError",
    "ai",
    "engine",
    "utils",
]
