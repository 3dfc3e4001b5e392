"""Player interface plus the computer players."""

import random

from .Board import RED
from .Move import PASS
from .ai import heuristic, search_minimax


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return the Move (or move text) to play on `board`."""
        raise NotImplementedError


class AIPlayer(Player):
    """Minimax player; passes when it has no legal move."""

    def __init__(self, color, depth=search_minimax.DEFAULT_DEPTH, weights=None):
        super().__init__(color)
        self.depth = depth
        self.weights = weights
        self.stats = []

    def next_move(self, board):
        if not board.can_move(self.color):
            return PASS
        return search_minimax.choose_move(
            board,
            self.color,
            depth=self.depth,
            weights=self.weights,
            stats=self.stats,
        )


class RandomPlayer(Player):
    """Uniformly random legal move baseline, reproducible from its seed."""

    def __init__(self, color, seed=None):
        super().__init__(color)
        self._rng = random.Random(seed)

    def next_move(self, board):
        moves = board.legal_moves(self.color)
        if not moves:
            return PASS
        return self._rng.choice(moves)


class GreedyPlayer(Player):
    """One-ply baseline: the move with the best static score for its color."""

    def __init__(self, color, weights=None):
        super().__init__(color)
        self.weights = weights

    def next_move(self, board):
        moves = board.legal_moves(self.color)
        if not moves:
            return PASS
        sense = 1 if self.color is RED else -1
        scratch = board.clone()
        best_move = moves[0]
        best_score = None
        for mv in moves:
            scratch.make_move(mv)
            try:
                score = heuristic.score_board(scratch, weights=self.weights) * sense
            finally:
                scratch.undo()
            if best_score is None or score > best_score:
                best_score = score
                best_move = mv
        return best_move
