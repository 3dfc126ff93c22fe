import pytest

from tictactoe.board import Board, apply_move, create_move, legal_moves, lines_of, outcome, start
from tictactoe.types import InvalidMoveError, Move, Outcome, OutcomeKind, Player

X, O = Player.CROSS, Player.NOUGHT

# Helpers

def make_board(rows, turn=X):
    """Build a board from strings like ["XX.", "OOX", "XO."]."""
    cells = [[None if ch == "." else Player.from_symbol(ch) for ch in row] for row in rows]
    return Board(len(rows), turn, cells)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 5])
def test_start_fills_whole_grid(size):
    board = start(O, size)
    assert board.turn is O
    assert board.size == size
    assert len(board.cells) == size
    assert all(len(row) == size for row in board.cells)
    assert board.empty_count() == size * size
    # Last row and column are initialized too
    assert board.cell(size - 1, size - 1) is None


@pytest.mark.parametrize("size", [0, -1])
def test_start_rejects_bad_size(size):
    with pytest.raises(ValueError):
        start(X, size)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
def test_lines_count_and_shape(size):
    lines = lines_of(size)
    assert len(lines) == 2 * size + 2
    for line in lines:
        assert len(line) == size
        assert len(set(line)) == size
        assert all(0 <= m.row < size and 0 <= m.col < size for m in line)


def test_lines_order_for_3x3():
    lines = lines_of(3)
    assert lines[0] == (Move(0, 0), Move(0, 1), Move(0, 2))
    assert lines[3] == (Move(0, 0), Move(1, 0), Move(2, 0))
    assert lines[6] == (Move(0, 0), Move(1, 1), Move(2, 2))
    assert lines[7] == (Move(0, 2), Move(1, 1), Move(2, 0))


def test_empty_board_is_undecided():
    assert outcome(start(X, 3)) == Outcome.undecided()


def test_full_board_without_line_is_draw():
    board = make_board(["XOX",
                        "XOO",
                        "OXX"])
    result = outcome(board)
    assert result.kind is OutcomeKind.DRAW
    assert result.winner is None and result.line is None


def test_win_reports_line():
    board = make_board(["OOO",
                        "XX.",
                        "X.."], turn=X)
    result = outcome(board)
    assert result.is_win
    assert result.winner is O
    assert result.line == (Move(0, 0), Move(0, 1), Move(0, 2))


def test_anti_diagonal_win():
    board = make_board(["XXO",
                        ".O.",
                        "OX."])
    result = outcome(board)
    assert result == Outcome.win(O, (Move(0, 2), Move(1, 1), Move(2, 0)))


def test_first_line_wins_when_two_complete():
    # Row 0 and column 0 both complete for X; rows come first
    board = make_board(["XXX",
                        "XOO",
                        "XOO"], turn=O)
    result = outcome(board)
    assert result.winner is X
    assert result.line == lines_of(3)[0]


def test_outcome_is_idempotent():
    board = make_board(["XO.",
                        ".X.",
                        "O.."])
    first = outcome(board)
    assert outcome(board) == first
    assert first.is_undecided


def test_outcome_ignores_fill_order():
    rows = ["XOX", "XOO", "OXX"]
    a = start(X, 3)
    for r, c in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]:
        a.apply(Move(r, c))
    b = make_board(rows, turn=O)
    assert a == b
    assert outcome(a) == outcome(b) == Outcome.draw()


def test_single_cell_board():
    board = start(X, 1)
    assert legal_moves(board) == [Move(0, 0)]
    board.apply(Move(0, 0))
    assert outcome(board) == Outcome.win(X, (Move(0, 0),))


def test_legal_moves_row_major():
    board = make_board(["X.O",
                        "...",
                        ".X."], turn=O)
    assert legal_moves(board) == [Move(0, 1), Move(1, 0), Move(1, 1), Move(1, 2),
                                  Move(2, 0), Move(2, 2)]


def test_apply_then_undo_restores_board():
    board = make_board(["X..",
                        ".O.",
                        "..."])
    before = board.copy()
    board.apply(Move(2, 2))
    assert board.cell(2, 2) is X
    assert board.turn is O
    board.undo(Move(2, 2))
    assert board == before
    assert board.cells == before.cells and board.turn is before.turn


def test_apply_returns_same_board():
    board = start(X, 3)
    assert board.apply(Move(1, 1)) is board


def test_apply_rejects_occupied_and_out_of_range():
    board = start(X, 3)
    board.apply(Move(0, 0))
    with pytest.raises(InvalidMoveError):
        board.apply(Move(0, 0))
    with pytest.raises(InvalidMoveError):
        board.apply(Move(3, 0))
    with pytest.raises(InvalidMoveError):
        board.apply(Move(-1, 2))


def test_undo_out_of_order_is_an_assertion():
    board = start(X, 3)
    board.apply(Move(0, 0))
    board.apply(Move(1, 1))
    with pytest.raises(AssertionError):
        board.undo(Move(0, 0))
    with pytest.raises(AssertionError):
        start(X, 3).undo(Move(0, 0))


def test_pure_apply_move_leaves_input_untouched():
    board = start(X, 3)
    after = apply_move(board, Move(1, 2))
    assert board.empty_count() == 9 and board.turn is X
    assert after.cell(1, 2) is X and after.turn is O


def test_create_move_bounds():
    assert create_move(2, 1) == Move(2, 1)
    assert create_move(2, 1, size=3) == Move(2, 1)
    with pytest.raises(InvalidMoveError):
        create_move(-1, 0)
    with pytest.raises(InvalidMoveError):
        create_move(0, 3, size=3)


def test_piece_symbols():
    board = make_board(["X.O", "...", "..."])
    assert board.piece(0, 0) == "X"
    assert board.piece(0, 1) == ""
    assert board.piece(0, 2) == "O"
