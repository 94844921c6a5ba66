"""Move history, time-travel cursor and the view state handed to front ends."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

try:
    from Board import Board, Mark
    from engine import referee, win_detector
except ImportError:
    from Gomoku_Replay.Board import Board, Mark
    from Gomoku_Replay.engine import referee, win_detector


LOGGER = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 15


class HistoryIndexError(IndexError):
    """Raised when jumping to a move that is not in the history."""


def move_label(index):
    if index > 0:
        return f"Go to move #{index}"
    return "Go to game start"


@dataclass(frozen=True)
class ViewState:
    board: Board
    winner: Optional[Mark]
    next_to_move: Optional[Mark]
    status: str
    move_list: Tuple[Tuple[int, str], ...]
    current_move: int


class GameSession:
    def __init__(self, board_size=DEFAULT_BOARD_SIZE, logger=None):
        if isinstance(board_size, bool) or not isinstance(board_size, int) or board_size < 1:
            raise ValueError(f"board_size must be a positive integer, got {board_size!r}")
        self._board_size = board_size
        self._history = [Board.empty(board_size)]
        self._cursor = 0
        self.logger = logger or LOGGER.info

    @property
    def board_size(self):
        return self._board_size

    @property
    def history(self):
        """Read-only snapshot of every board, index = number of moves played."""
        return tuple(self._history)

    @property
    def current_move(self):
        return self._cursor

    @property
    def current_board(self):
        return self._history[self._cursor]

    @property
    def winner(self):
        return win_detector.detect_winner(self.current_board)

    def play(self, row, col):
        """
        Place the next mark at (row, col) on the board under the cursor.
        Illegal moves (game won, occupied or off-board cell) leave the session
        untouched and return False. Any later history is discarded on success.
        """
        board = self.current_board
        try:
            referee.check_move(board, row, col)
        except referee.IllegalMoveError as exc:
            LOGGER.debug("Rejected move (%s, %s) at move %d: %s", row, col, self._cursor, exc)
            return False

        mark = Mark.for_move(self._cursor)
        next_board = board.place(row, col, mark)

        dropped = len(self._history) - (self._cursor + 1)
        self._history = self._history[: self._cursor + 1]
        self._history.append(next_board)
        self._cursor = len(self._history) - 1

        if dropped:
            self.logger(f"Discarded {dropped} later move(s)")
        self.logger(f"Move {self._cursor}: {mark.value} ({row}, {col})")

        winner = win_detector.detect_winner(next_board)
        if winner is not None:
            self.logger(f"Winner: {winner.value}")
        return True

    def jump_to(self, move_index):
        """Move the cursor to an existing history entry; history itself is untouched."""
        if isinstance(move_index, bool) or not isinstance(move_index, int):
            raise TypeError(f"move index must be an int, got {type(move_index).__name__}")
        if not 0 <= move_index < len(self._history):
            raise HistoryIndexError(
                f"move {move_index} is outside history 0..{len(self._history) - 1}"
            )
        self._cursor = move_index
        self.logger(f"Jumped to {move_label(move_index).removeprefix('Go to ')}")

    def current_view(self):
        board = self.current_board
        winner = win_detector.detect_winner(board)
        if winner is not None:
            next_to_move = None
            status = f"Winner: {winner.value}"
        else:
            next_to_move = Mark.for_move(self._cursor)
            status = f"Next player: {next_to_move.value}"
        move_list = tuple((i, move_label(i)) for i in range(len(self._history)))
        return ViewState(
            board=board,
            winner=winner,
            next_to_move=next_to_move,
            status=status,
            move_list=move_list,
            current_move=self._cursor,
        )
