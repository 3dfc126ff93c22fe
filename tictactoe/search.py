"""
Alpha-beta search engine and strategy adapters.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

import numpy as np

from .board import Board, legal_moves, outcome
from .types import Move, Player, SearchResult, SearchStats, TerminalPositionError

logger = logging.getLogger(__name__)

INF = 10**9

NodeResult = Tuple[Optional[Move], int]  # (best_move, score)


@contextmanager
def applied(board: Board, move: Move) -> Iterator[Board]:
    """Apply `move` for the duration of the block; undo on every exit path."""
    board.apply(move)
    try:
        yield board
    finally:
        board.undo(move)


class SearchEngine:
    """Exact minimax with alpha-beta pruning.

    Scores are +1/-1/0 from the point of view of the player to move at the
    root. That perspective is fixed for the whole search: its nodes maximize,
    the opponent's nodes minimize.
    """

    def search(self, board: Board) -> SearchResult:
        """Search `board` in place and return the best move for the side to move.

        The board is restored before returning.
        """
        if not outcome(board).is_undecided:
            raise TerminalPositionError("Position is already decided; no move to search")

        stats = SearchStats()
        perspective: Player = board.turn
        stats.nodes += 1

        best_move: Optional[Move] = None
        best_score: int = -INF
        alpha: int = -INF
        beta: int = INF
        for m in legal_moves(board):
            with applied(board, m):
                # Lower bound one below alpha so a tie with alpha is an exact value.
                _, sc = self._alphabeta(board, perspective, alpha - 1, beta, stats)
            if sc > best_score:
                best_score = sc
            if best_score > alpha:
                alpha = best_score
            if sc == alpha:
                best_move = m

        logger.debug("search for %s: move=%s score=%d nodes=%d",
                     perspective, best_move, best_score, stats.nodes)
        return SearchResult(best_move, best_score, stats.nodes)

    def _alphabeta(self, board: Board, perspective: Player, alpha: int, beta: int,
                   stats: SearchStats) -> NodeResult:
        stats.nodes += 1
        result = outcome(board)
        if not result.is_undecided:
            return None, result.score_for(perspective)

        best_move: Optional[Move] = None
        if board.turn is perspective:
            val: int = -INF
            for m in legal_moves(board):
                with applied(board, m):
                    _, sc = self._alphabeta(board, perspective, alpha, beta, stats)
                if sc > val:
                    val = sc
                if val > alpha:
                    alpha = val
                if sc == alpha:
                    best_move = m
                if alpha >= beta:
                    break
        else:
            val = INF
            for m in legal_moves(board):
                with applied(board, m):
                    _, sc = self._alphabeta(board, perspective, alpha, beta, stats)
                if sc < val:
                    val = sc
                if val < beta:
                    beta = val
                if sc == beta:
                    best_move = m
                if alpha >= beta:
                    break
        return best_move, val

    def best_move(self, board: Board) -> Move:
        result = self.search(board)
        assert result.move is not None
        return result.move

    def score_moves(self, board: Board) -> np.ndarray:
        """Exact score of every legal move for the side to move.

        Returns a size x size float array, NaN where the cell is occupied.
        Each move is searched with a full window, so this visits more nodes
        than search().
        """
        if not outcome(board).is_undecided:
            raise TerminalPositionError("Position is already decided; no moves to score")

        perspective = board.turn
        stats = SearchStats()
        scores = np.full((board.size, board.size), np.nan)
        for m in legal_moves(board):
            with applied(board, m):
                _, sc = self._alphabeta(board, perspective, -INF, INF, stats)
            scores[m.row, m.col] = sc
        logger.debug("scored %d moves for %s in %d nodes",
                     int(np.count_nonzero(~np.isnan(scores))), perspective, stats.nodes)
        return scores


class SearchStrategy(ABC):
    """Abstract interface for search strategies."""

    @abstractmethod
    def search(self, board: Board) -> SearchResult:  # pragma: no cover
        raise NotImplementedError


class AlphaBetaSearchStrategy(SearchStrategy):
    """Adapter around SearchEngine implementing the interface."""

    def __init__(self) -> None:
        self._engine = SearchEngine()

    def search(self, board: Board) -> SearchResult:
        return self._engine.search(board)

    def __str__(self) -> str:
        return "Alpha-beta minimax"


def get_search_strategy() -> SearchStrategy:
    """Factory for a default search strategy (alpha-beta)."""
    return AlphaBetaSearchStrategy()


__all__ = [
    "SearchEngine",
    "SearchStrategy",
    "AlphaBetaSearchStrategy",
    "get_search_strategy",
    "applied",
    "INF",
]
