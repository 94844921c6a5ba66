"""CLI options for board size, front end and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku Replay (five in a row with move history)")
    parser.add_argument("--board-size", type=int, help="Board size, fixed for the session (default from settings)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Use the pygame window instead of the console")
    parser.add_argument("--window-size", type=int, help="Pygame window size in pixels (default from settings)")
    parser.add_argument("--verbose", action="store_true", help="Log rejected moves and other debug output")
    return parser.parse_args(argv)
