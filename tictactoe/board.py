from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional, Tuple

from .types import (
    InvalidMoveError,
    Line,
    MIN_BOARD_SIZE,
    Move,
    Outcome,
    Player,
)

# Basic type aliases (kept local to avoid circular imports)
Cell = Optional[Player]  # None when empty
Grid = List[List[Cell]]


# -----------------------------
# Board state
# -----------------------------
@dataclass(eq=False)
class Board:
    """Mutable N x N board plus the player whose turn it is.

    During search the board is changed in place with apply()/undo(), which
    must be strictly nested. Equality compares size, cells and turn only.
    """

    size: int
    turn: Player
    cells: Grid
    _history: List[Move] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if len(self.cells) != self.size or any(len(row) != self.size for row in self.cells):
            raise ValueError(f"Board cells must form a {self.size}x{self.size} grid")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.size == other.size and self.turn is other.turn
                and self.cells == other.cells)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def piece(self, row: int, col: int) -> str:
        """Symbol at (row, col), or "" for an empty cell."""
        v = self.cells[row][col]
        return v.symbol if v is not None else ""

    def is_empty(self, move: Move) -> bool:
        return self.cells[move.row][move.col] is None

    def empty_count(self) -> int:
        return sum(1 for row in self.cells for v in row if v is None)

    def apply(self, move: Move) -> Board:
        """Place the current turn's mark at `move` and pass the turn. In place."""
        if not self.in_bounds(move.row, move.col):
            raise InvalidMoveError(f"Move {move} is outside a {self.size}x{self.size} board")
        if not self.is_empty(move):
            raise InvalidMoveError(f"Cell {move} is already occupied")
        self.cells[move.row][move.col] = self.turn
        self.turn = self.turn.other
        self._history.append(move)
        return self

    def undo(self, move: Move) -> None:
        """Take back `move`, which must be the last one applied."""
        assert self._history and self._history[-1] == move, (
            f"undo({move}) out of order; last applied was "
            f"{self._history[-1] if self._history else None}"
        )
        self._history.pop()
        self.cells[move.row][move.col] = None
        self.turn = self.turn.other

    def copy(self) -> Board:
        return Board(self.size, self.turn, [row[:] for row in self.cells], list(self._history))


# -----------------------------
# Construction and moves
# -----------------------------
def start(first: Player, size: int) -> Board:
    """Empty size x size board with `first` to move."""
    if not isinstance(size, int) or size < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be an integer >= {MIN_BOARD_SIZE}, got {size!r}")
    return Board(size, first, [[None] * size for _ in range(size)])


def create_move(row: int, col: int, size: Optional[int] = None) -> Move:
    """Build a move, checking bounds when the board size is known."""
    if row < 0 or col < 0:
        raise InvalidMoveError(f"Move ({row}, {col}) has a negative coordinate")
    if size is not None and (row >= size or col >= size):
        raise InvalidMoveError(f"Move ({row}, {col}) is outside a {size}x{size} board")
    return Move(row, col)


def legal_moves(board: Board) -> List[Move]:
    """Every empty cell, row-major. This order decides ties in the search."""
    return [Move(r, c)
            for r in range(board.size)
            for c in range(board.size)
            if board.cells[r][c] is None]


# -----------------------------
# Lines and outcome
# -----------------------------
@lru_cache(maxsize=None)
def lines_of(size: int) -> Tuple[Line, ...]:
    """Rows, then columns, then the main and anti diagonals."""
    rows = [tuple(Move(r, c) for c in range(size)) for r in range(size)]
    cols = [tuple(Move(r, c) for r in range(size)) for c in range(size)]
    main = tuple(Move(i, i) for i in range(size))
    anti = tuple(Move(i, size - 1 - i) for i in range(size))
    return tuple(rows + cols + [main, anti])


def outcome(board: Board) -> Outcome:
    """Classify the position as undecided, a draw, or a win with its line.

    A line with an empty cell is still open; a full line holding both marks
    is dead. The first completed line in lines_of() order wins.
    """
    cells = board.cells
    open_line = False
    for line in lines_of(board.size):
        marks = {cells[m.row][m.col] for m in line}
        if None in marks:
            open_line = True
        elif len(marks) == 1:
            return Outcome.win(marks.pop(), line)
    return Outcome.undecided() if open_line else Outcome.draw()


def apply_move(board: Board, move: Move) -> Board:
    """Apply a move to a copy of the board; the argument is left untouched."""
    return board.copy().apply(move)
