"""Gomoku_Replay package exports."""

from .Board import Board, Mark
from .GameSession import GameSession, HistoryIndexError, ViewState, move_label
from .engine.referee import IllegalMoveError
from .engine.win_detector import detect_winner, winning_line

# Subpackages for rules, GUI, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "Mark",
    "GameSession",
    "HistoryIndexError",
    "ViewState",
    "move_label",
    "IllegalMoveError",
    "detect_winner",
    "winning_line",
    "engine",
    "gui",
    "utils",
]
