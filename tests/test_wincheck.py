import pytest

from gomoku_ai.types import Color, Outcome
from gomoku_ai.wincheck import check_winner, has_five


@pytest.mark.parametrize("stones", [
    [(7, c) for c in range(3, 8)],                  # horizontal
    [(r, 2) for r in range(10, 15)],                # vertical, touching the edge
    [(i, i) for i in range(5)],                     # diagonal
    [(4 + i, 10 - i) for i in range(5)],            # anti-diagonal
    [(10 + i, 4 - i) for i in range(5)],            # anti-diagonal into the corner
])
@pytest.mark.parametrize("color, outcome", [
    (Color.BLACK, Outcome.BLACK_WINS),
    (Color.WHITE, Outcome.WHITE_WINS),
])
def test_five_on_any_axis_wins(make_board, stones, color, outcome):
    board = make_board(**{color.name.lower(): stones})
    assert has_five(board, color)
    assert not has_five(board, color.opposite())
    assert check_winner(board) == outcome
    assert check_winner(board).winner == color


def test_four_is_not_a_win(make_board):
    board = make_board(black=[(7, c) for c in range(3, 7)], white=[(8, c) for c in range(3, 7)])
    assert check_winner(board) == Outcome.CONTINUE
    assert check_winner(board).winner is None


def test_broken_five_is_not_a_win(make_board):
    board = make_board(black=[(7, 2), (7, 3), (7, 5), (7, 6), (7, 7)])
    assert check_winner(board) == Outcome.CONTINUE


def test_overline_wins(make_board):
    board = make_board(black=[(2, c) for c in range(6)])
    assert check_winner(board) == Outcome.BLACK_WINS


def test_full_board_without_five_is_a_draw(drawn_board):
    assert drawn_board.is_full()
    assert check_winner(drawn_board) == Outcome.DRAW


def test_full_board_with_five_is_a_win(drawn_board):
    for c in range(5):
        drawn_board.set((0, c), Color.WHITE)
    assert check_winner(drawn_board) == Outcome.WHITE_WINS


def test_empty_board_continues(make_board):
    assert check_winner(make_board()) == Outcome.CONTINUE
