"""CLI options for search depth, setup blocks, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Ataxx AI (minimax vs minimax)")
    parser.add_argument("--depth", type=int, help="Search depth for both AI players")
    parser.add_argument("--red-depth", type=int, help="Search depth for Red (overrides --depth)")
    parser.add_argument("--blue-depth", type=int, help="Search depth for Blue (overrides --depth)")
    parser.add_argument("--blocks", help="Comma-separated block squares placed before play, e.g. c3,b2")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default="config/weights.yaml", help="Path to heuristic weights YAML")
    parser.add_argument("--show-board", action="store_true", help="Print the board after every change")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging from the engine")
    return parser.parse_args(argv)
