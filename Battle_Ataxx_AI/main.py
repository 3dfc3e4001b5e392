"""Entry point for Battle Ataxx AI matches. Load config, wire players, start Ataxxgame."""

import logging
from pathlib import Path

import yaml

from .Ataxxgame import Ataxxgame
from .Board import BLUE, EMPTY, RED
from .Player import AIPlayer
from .ai import heuristic
from .utils.cli import parse_args
from .utils.logger import log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Ataxx_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}


def build_game(args, settings):
    depth = args.depth or settings.get("search_depth", 3)
    red_depth = args.red_depth or settings.get("red_depth", depth)
    blue_depth = args.blue_depth or settings.get("blue_depth", depth)
    if args.blocks:
        blocks = [sq.strip() for sq in args.blocks.split(",") if sq.strip()]
    else:
        blocks = settings.get("blocks") or []
    show_board = args.show_board or bool(settings.get("show_board", False))

    weights = heuristic.load_weights(args.weights)
    renderer = (lambda board: print(board.to_string(legend=True))) if show_board else None

    return Ataxxgame(
        red_player=AIPlayer(RED, depth=red_depth, weights=weights),
        blue_player=AIPlayer(BLUE, depth=blue_depth, weights=weights),
        blocks=blocks,
        logger=log_event,
        renderer=renderer,
    )


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    settings = load_settings(args.settings)

    game = build_game(args, settings)
    result = game.play()
    outcome = {RED: "Red wins", BLUE: "Blue wins", EMPTY: "Draw"}
    print(outcome.get(result, "Unknown result"))
    return result


if __name__ == "__main__":
    main()
