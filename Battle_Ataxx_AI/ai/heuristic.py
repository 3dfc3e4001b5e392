"""Static evaluation of Ataxx positions (positive favors Red) and weight loading."""

from pathlib import Path
import yaml

from ..Board import BLUE, EMPTY, RED
from ..engine import move_generator, squares

# A win is worth WINNING_VALUE + remaining depth, so sooner wins score higher.
WINNING_VALUE = 2 ** 31 - 21
INFTY = 2 ** 31 - 1

# Default weights; can be overridden by loading config/weights.yaml.
DEFAULT_WEIGHTS = {
    "piece_diff": 8,
    "edge": 5,          # piece on the outer ring
    "open_neighbor": 2,  # empty or friendly neighbor (penalized)
    "enemy_neighbor": 1,
    "mobility": 5,
    "endgame": 10,
    "endgame_pieces": 2,
}


def load_weights(path="config/weights.yaml"):
    """Load heuristic weights from YAML; missing file or keys fall back to defaults."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Battle_Ataxx_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    weights = dict(DEFAULT_WEIGHTS)
    for key, value in (data.get("weights") or {}).items():
        if key not in DEFAULT_WEIGHTS:
            raise ValueError(f"unknown heuristic weight: {key}")
        weights[key] = int(value)
    return weights


def score_board(board, winning_value=WINNING_VALUE, weights=None):
    """
    Heuristic value of `board` from Red's point of view.
    Won positions return +/- winning_value (0 for a draw).
    """
    winner = board.winner
    if winner is not None:
        if winner is RED:
            return winning_value
        if winner is BLUE:
            return -winning_value
        return 0

    weights = weights or DEFAULT_WEIGHTS
    red_moves = move_generator.legal_moves(board, RED)
    blue_moves = move_generator.legal_moves(board, BLUE)

    diff = board.red_pieces - board.blue_pieces
    pressure = max_pressure(board, red_moves, BLUE) - max_pressure(board, blue_moves, RED)
    aggression = 0
    if board.blue_pieces <= weights["endgame_pieces"]:
        aggression += total_pressure(board, red_moves, BLUE)
    if board.red_pieces <= weights["endgame_pieces"]:
        aggression -= total_pressure(board, blue_moves, RED)

    return (
        diff * weights["piece_diff"]
        + pressure * weights["mobility"]
        + exposure(board, weights)
        + aggression * weights["endgame"]
    )


def exposure(board, weights=None):
    """
    Positional term: edge pieces are safer, pieces with empty or friendly
    neighbors are easier to capture around, enemy neighbors are targets.
    """
    weights = weights or DEFAULT_WEIGHTS
    total = 0
    for sq in squares.REAL_SQUARES:
        color = board[sq]
        if not color.is_piece():
            continue
        total += _piece_exposure(board, sq, color, weights) * (1 if color is RED else -1)
    return total


def _piece_exposure(board, sq, color, weights):
    score = weights["edge"] if squares.is_edge(sq) else 0
    enemy = color.opposite()
    for nb in squares.surrounding(sq):
        val = board[nb]
        if val is EMPTY or val is color:
            score -= weights["open_neighbor"]
        elif val is enemy:
            score += weights["enemy_neighbor"]
    return score


def count_around(board, sq, color):
    """Number of `color` pieces touching square `sq`."""
    return sum(1 for nb in squares.surrounding(sq) if board[nb] is color)


def max_pressure(board, moves, target):
    """Most `target` pieces any one destination in `moves` would touch (0 if none)."""
    best = 0
    for dst in move_generator.destinations(moves):
        best = max(best, count_around(board, dst, target))
    return best


def total_pressure(board, moves, target):
    """Sum over `moves` of the `target` pieces touching each destination."""
    return sum(count_around(board, dst, target) for dst in move_generator.destinations(moves))
