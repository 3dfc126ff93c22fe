"""
In-process API used by front ends: start a game, replay moves, classify
positions and ask the engine for its move.

apply_move() here is the pure variant for callers replaying a game; the
search itself works on one board in place through Board.apply/undo.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .board import (
    Board,
    apply_move,
    create_move as _create_move,
    legal_moves,
    lines_of,
    outcome,
    start,
)
from .search import SearchEngine
from .types import Move

__all__ = [
    "start",
    "apply_move",
    "outcome",
    "best_move",
    "create_move",
    "score_moves",
    "legal_moves",
    "lines_of",
    "get_engine",
    "SearchEngine",
]


def get_engine() -> SearchEngine:
    """Get a new search engine instance."""
    return SearchEngine()


def create_move(row: int, col: int, board: Optional[Board] = None) -> Move:
    """Validate and build a move; bounds are checked against `board` when given."""
    return _create_move(row, col, board.size if board is not None else None)


def best_move(board: Board) -> Move:
    """Optimal move for the side to move. The caller's board is not modified."""
    return get_engine().best_move(board.copy())


def score_moves(board: Board) -> np.ndarray:
    """Exact score of every legal move, NaN for occupied cells."""
    return get_engine().score_moves(board.copy())
