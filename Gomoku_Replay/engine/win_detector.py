"""Five-in-a-row detection by scanning every length-5 window of the board."""

from typing import Iterator, Optional, Tuple

try:
    from Board import Board, Mark
except ImportError:
    from Gomoku_Replay.Board import Board, Mark

WINDOW_LENGTH = 5

Window = Tuple[Tuple[int, int], ...]


def iter_windows(size: int) -> Iterator[Window]:
    """
    Yield every run of WINDOW_LENGTH cells on a size x size grid.
    Order: horizontal, vertical, diagonal down-right, diagonal down-left.
    """
    n = WINDOW_LENGTH
    last_start = size - n

    for i in range(size):
        for j in range(last_start + 1):
            yield tuple((i, j + k) for k in range(n))

    for i in range(last_start + 1):
        for j in range(size):
            yield tuple((i + k, j) for k in range(n))

    for i in range(last_start + 1):
        for j in range(last_start + 1):
            yield tuple((i + k, j + k) for k in range(n))

    for i in range(last_start + 1):
        for j in range(n - 1, size):
            yield tuple((i + k, j - k) for k in range(n))


def winning_line(board: Board) -> Optional[Window]:
    """Return the first window holding five equal marks, or None."""
    for window in iter_windows(board.size):
        r0, c0 = window[0]
        first = board[r0][c0]
        if first is None:
            continue
        if all(board[r][c] == first for r, c in window[1:]):
            return window
    return None


def detect_winner(board: Board) -> Optional[Mark]:
    """Mark owning the first winning window in scan order; None if nobody has five."""
    window = winning_line(board)
    if window is None:
        return None
    r, c = window[0]
    return board[r][c]
