from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

import numpy as np

from config import get_config, load_config_from_file, setup_logging
from tictactoe import (
    Board,
    InvalidMoveError,
    Move,
    Outcome,
    Player,
    apply_move,
    best_move,
    create_move,
    outcome,
    score_moves,
    start,
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play N x N tic-tac-toe against an exact engine")
    ap.add_argument("--config", default=None, help="JSON config file to load first")
    ap.add_argument("--size", type=int, default=None, help="Board side length")
    ap.add_argument("--first", choices=["X", "O"], default=None, help="Player who moves first")
    ap.add_argument("--human", choices=["X", "O", "none"], default=None,
                    help="Side played from the keyboard; 'none' lets the engine play itself")
    ap.add_argument("--show-scores", action="store_true", default=None,
                    help="Print the engine's score for every legal move")
    return ap.parse_args(argv)


def render_board(board: Board, use_unicode: bool = False) -> str:
    """Text rendering with row/column indices; '.' marks an empty cell."""
    sep = " │ " if use_unicode else " | "
    lines = ["   " + "   ".join(str(c) for c in range(board.size))]
    for r in range(board.size):
        cells = [board.piece(r, c) or "." for c in range(board.size)]
        lines.append(f"{r}  " + sep.join(cells))
    return "\n".join(lines)


def render_scores(scores: np.ndarray) -> str:
    rows = []
    for row in scores:
        rows.append(" ".join("  ." if np.isnan(v) else f"{int(v):+3d}" for v in row))
    return "\n".join(rows)


def parse_move_input(text: str, board: Board) -> Move:
    """Parse "row col" (or "row,col") into a legal move on `board`."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError('Expected two numbers, e.g. "0 2"')
    row, col = (int(p) for p in parts)
    move = create_move(row, col, board)
    if not board.is_empty(move):
        raise InvalidMoveError(f"Cell {move} is already occupied")
    return move


def describe_outcome(result: Outcome) -> str:
    if result.is_win:
        return f"{result.winner} wins along {', '.join(str(m) for m in result.line)}"
    if result.is_draw:
        return "It's a draw"
    return "Game in progress"


def read_human_move(board: Board, read: Callable[[str], str] = input) -> Move:
    while True:
        try:
            return parse_move_input(read(f"{board.turn}'s turn. Input move (row col): "), board)
        except (InvalidMoveError, ValueError) as e:
            print(f"Invalid move: {e}. Try again.")


def play(board: Board, human: Optional[Player], show_scores: bool = False,
         use_unicode: bool = False, read: Callable[[str], str] = input) -> Outcome:
    """Alternate human and engine moves until the game is decided."""
    print(render_board(board, use_unicode))
    result = outcome(board)
    while result.is_undecided:
        if board.turn is human:
            move = read_human_move(board, read)
        else:
            if show_scores:
                print(render_scores(score_moves(board)))
            move = best_move(board)
            print(f"Engine ({board.turn}) plays {move}")
        board = apply_move(board, move)
        logger.debug("applied %s, %d empty cells left", move, board.empty_count())
        print(render_board(board, use_unicode))
        result = outcome(board)
    print(describe_outcome(result))
    return result


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = load_config_from_file(args.config) if args.config else get_config()
    setup_logging()

    size = args.size if args.size is not None else cfg.engine.board_size
    first = Player.from_symbol(args.first or cfg.engine.first_player)
    human_sym = args.human or cfg.ui.human_player
    human = None if human_sym == "none" else Player.from_symbol(human_sym)
    show_scores = cfg.ui.show_scores if args.show_scores is None else args.show_scores

    play(start(first, size), human, show_scores=show_scores, use_unicode=cfg.ui.use_unicode)


if __name__ == "__main__":
    main()
