import pytest

from gomoku_ai.board import Board
from gomoku_ai.types import Color


def build_board(black=(), white=()):
    board = Board()
    for pos in black:
        board.set(pos, Color.BLACK)
    for pos in white:
        board.set(pos, Color.WHITE)
    return board


@pytest.fixture
def make_board():
    return build_board


@pytest.fixture
def drawn_board():
    """Full board with no five anywhere: every axis alternates in runs of at most two."""
    board = Board()
    for r in range(board.size):
        for c in range(board.size):
            board.set((r, c), Color.BLACK if (c + 2 * r) % 4 < 2 else Color.WHITE)
    return board
