"""
Type definitions for the tic-tac-toe engine.

This module provides the small value types shared by the board and the
search engine:
- Player enumeration with symbol parsing
- Move coordinates
- Outcome, a tagged value (undecided, draw or win with its line)
- Search results and node statistics
- Error types surfaced to callers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class InvalidMoveError(ValueError):
    """Raised when a move is out of bounds or targets an occupied cell."""


class TerminalPositionError(ValueError):
    """Raised when a search is requested on a finished position."""


class Player(Enum):
    """The two players. Cross conventionally moves first."""

    CROSS = "X"
    NOUGHT = "O"

    @property
    def other(self) -> Player:
        return Player.NOUGHT if self is Player.CROSS else Player.CROSS

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> Player:
        """Parse 'X' or 'O' (any case) into a player."""
        s = symbol.strip().upper() if isinstance(symbol, str) else ""
        for player in cls:
            if player.value == s:
                return player
        raise ValueError(f"Unknown player symbol: {symbol!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Move:
    """A (row, col) coordinate. The acting player is whoever's turn it is."""

    row: int
    col: int

    def __iter__(self):
        yield self.row
        yield self.col

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


Line = Tuple[Move, ...]


class OutcomeKind(Enum):
    UNDECIDED = "undecided"
    DRAW = "draw"
    WIN = "win"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a position.

    Exactly one of three variants: undecided, draw, or a win carrying the
    winner and the completed line. Build values with the factory
    classmethods rather than the constructor.
    """

    kind: OutcomeKind
    winner: Optional[Player] = None
    line: Optional[Line] = None

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.WIN:
            if self.winner is None or not self.line:
                raise ValueError("A win needs a winner and a winning line")
        elif self.winner is not None or self.line is not None:
            raise ValueError(f"{self.kind.value} outcome cannot carry a winner")

    @classmethod
    def undecided(cls) -> Outcome:
        return _UNDECIDED

    @classmethod
    def draw(cls) -> Outcome:
        return _DRAW

    @classmethod
    def win(cls, player: Player, line: Line) -> Outcome:
        return cls(OutcomeKind.WIN, player, tuple(line))

    @property
    def is_undecided(self) -> bool:
        return self.kind is OutcomeKind.UNDECIDED

    @property
    def is_draw(self) -> bool:
        return self.kind is OutcomeKind.DRAW

    @property
    def is_win(self) -> bool:
        return self.kind is OutcomeKind.WIN

    def score_for(self, player: Player) -> int:
        """Exact value of a finished position: +1 win, -1 loss, 0 draw."""
        if self.kind is OutcomeKind.WIN:
            return WIN_SCORE if self.winner is player else LOSS_SCORE
        return DRAW_SCORE

    def __str__(self) -> str:
        if self.kind is OutcomeKind.WIN:
            cells = ", ".join(str(m) for m in self.line)  # type: ignore[union-attr]
            return f"Win({self.winner}, [{cells}])"
        return self.kind.value.capitalize()


_UNDECIDED = Outcome(OutcomeKind.UNDECIDED)
_DRAW = Outcome(OutcomeKind.DRAW)


@dataclass
class SearchStats:
    """Node counter owned by a single root search."""
    nodes: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Chosen move (None for terminal positions) and its score."""
    move: Optional[Move]
    score: int
    nodes: int = 0


# Constants
MIN_BOARD_SIZE = 1
WIN_SCORE = 1
DRAW_SCORE = 0
LOSS_SCORE = -1
