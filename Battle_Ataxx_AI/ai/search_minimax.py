"""Depth-limited minimax with alpha-beta pruning over make/undo on a scratch board."""

import logging
import time

from . import heuristic
from ..Board import BLUE, RED
from ..Move import PASS
from ..engine import move_generator

LOGGER = logging.getLogger(__name__)

DEFAULT_DEPTH = 3
INFTY = heuristic.INFTY
WINNING_VALUE = heuristic.WINNING_VALUE


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, color, depth=DEFAULT_DEPTH, weights=None, stats=None):
        self.color = color
        self.depth = depth
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.best_move = None
        self.best_score = None

    def choose_move(self, board):
        """
        Return the best move for self.color, or PASS if it has no legal move.
        Searches a clone, so `board` is left untouched.
        """
        if board.whose_move is not self.color:
            raise ValueError(f"it is {board.whose_move}'s move, not {self.color}'s")
        if not board.can_move(self.color):
            return PASS

        self.start_time = time.time()
        self.node_counter = 0
        self.best_move = None
        scratch = board.clone()
        sense = 1 if self.color is RED else -1
        self.best_score = self._minimax(scratch, self.depth, True, sense, -INFTY, INFTY)

        if self.stats_list is not None:
            self._record_stats()
        LOGGER.debug(
            "%s chose %s (score=%s, nodes=%d)", self.color, self.best_move, self.best_score, self.node_counter
        )
        return self.best_move

    def _minimax(self, board, depth, save_move, sense, alpha, beta):
        """
        Value of `board` searched `depth` plies, maximizing for Red when sense == 1
        and minimizing for Blue when sense == -1. Records the best move only when
        save_move is set (the root).
        """
        self.node_counter += 1

        if depth == 0 or board.winner is not None:
            return heuristic.score_board(board, WINNING_VALUE + depth, weights=self.weights)

        color = RED if sense == 1 else BLUE
        moves = move_generator.legal_moves(board, color)
        if not moves:
            # Nothing to search below this node; leave the bound where it is.
            return alpha if sense == 1 else beta

        best_score = None
        best_local_move = None
        for move in moves:
            board.make_move(move)
            try:
                score = self._minimax(board, depth - 1, False, -sense, alpha, beta)
            finally:
                board.undo()

            if best_local_move is None:
                improved = True
            elif sense == 1:
                improved = score > best_score
            else:
                improved = score < best_score
            if not improved:
                continue

            best_score = score
            best_local_move = move
            if sense == 1:
                alpha = max(alpha, best_score)
            else:
                beta = min(beta, best_score)
            if alpha >= beta:
                break

        if save_move:
            self.best_move = best_local_move
        return best_score

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": str(self.color),
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
            "score": self.best_score,
        })


def choose_move(board, color, depth=DEFAULT_DEPTH, weights=None, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(color=color, depth=depth, weights=weights, stats=stats)
    return searcher.choose_move(board)
