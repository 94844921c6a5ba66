"""Entry point for Gomoku Replay. Load config, build the session, start a front end."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import configure_logging, log_event
    from GameSession import DEFAULT_BOARD_SIZE, GameSession
    from console import ConsoleFrontEnd
    from gui.pygame_view import PygameView
except ImportError:
    from Gomoku_Replay.utils.cli import parse_args
    from Gomoku_Replay.utils.logger import configure_logging, log_event
    from Gomoku_Replay.GameSession import DEFAULT_BOARD_SIZE, GameSession
    from Gomoku_Replay.console import ConsoleFrontEnd
    from Gomoku_Replay.gui.pygame_view import PygameView


PROJECT_DIR = Path(__file__).resolve().parent
DEFAULT_SETTINGS = "config/settings.yaml"


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Gomoku_Replay/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def build_session(args, settings):
    board_size = args.board_size or settings.get("board_size", DEFAULT_BOARD_SIZE)
    return GameSession(board_size=board_size, logger=log_event)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = load_settings(args.settings)
    except FileNotFoundError:
        if args.settings != DEFAULT_SETTINGS:
            raise
        settings = {}

    session = build_session(args, settings)

    if args.gui:
        window_size = args.window_size or settings.get("window_size", 800)
        view = PygameView(board_size=session.board_size, window_size=window_size)
        try:
            view.run(session)
        finally:
            view.close()
    else:
        ConsoleFrontEnd(session).run()

    view_state = session.current_view()
    print(view_state.status if view_state.winner else "Game left unfinished")


if __name__ == "__main__":
    main()
