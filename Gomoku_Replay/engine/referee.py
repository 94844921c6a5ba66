"""Move validation: game-over guard, bounds and occupancy."""

try:
    from engine import win_detector
except ImportError:
    from Gomoku_Replay.engine import win_detector


class IllegalMoveError(ValueError):
    """Raised when a move may not be played on the given board."""


def check_move(board, row, col):
    """
    Validate a move against a finished game, bounds and occupancy.
    Raises IllegalMoveError on invalid moves.
    """
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, int):
            raise IllegalMoveError(f"Coordinates must be integers, got {type(value).__name__}")

    winner = win_detector.detect_winner(board)
    if winner is not None:
        raise IllegalMoveError(f"Game already won by {winner.value}")

    if not board.in_bounds(row, col):
        raise IllegalMoveError("Move out of bounds")
    if not board.is_empty(row, col):
        raise IllegalMoveError("Cell already occupied")

    return True
