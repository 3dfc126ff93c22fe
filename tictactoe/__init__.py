"""Tic-tac-toe package: exact N x N engine and its value types.

Usage examples:
    from tictactoe import start, best_move, outcome, Player
    from tictactoe import SearchEngine, get_search_strategy
"""
from __future__ import annotations

# Engine API
from .engine import (
    start,
    apply_move,
    outcome,
    best_move,
    create_move,
    score_moves,
    legal_moves,
    lines_of,
    get_engine,
    SearchEngine,
)
from .board import Board

# Search interfaces
from .search import SearchStrategy, AlphaBetaSearchStrategy, get_search_strategy

# Value types and errors
from .types import (
    Player,
    Move,
    Outcome,
    OutcomeKind,
    SearchResult,
    InvalidMoveError,
    TerminalPositionError,
)
