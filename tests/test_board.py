import numpy as np
import pytest

from gomoku_ai.board import Board
from gomoku_ai.types import Color


def test_new_board_is_empty():
    board = Board()
    assert board.size == 15
    assert board.is_blank()
    assert not board.is_full()
    assert board.cells.dtype == np.int8


def test_snapshot_round_trip():
    rows = [[0] * 15 for _ in range(15)]
    rows[7][7] = 1
    rows[3][4] = 2
    board = Board.from_rows(rows)
    assert board.get((7, 7)) == Color.BLACK
    assert board.get((3, 4)) == Color.WHITE
    assert board.to_rows() == rows


def test_snapshot_rejects_bad_shape_and_values():
    with pytest.raises(ValueError):
        Board.from_rows([[0] * 15 for _ in range(14)])
    rows = [[0] * 15 for _ in range(15)]
    rows[0][0] = 3
    with pytest.raises(ValueError):
        Board.from_rows(rows)


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (15, 0), (0, 15)])
def test_out_of_range_access_raises(pos):
    board = Board()
    with pytest.raises(IndexError):
        board.get(pos)
    with pytest.raises(IndexError):
        board.set(pos, Color.BLACK)


def test_placed_restores_cell_even_on_error(make_board):
    board = make_board(black=[(7, 7)])
    before = board.copy()
    with board.placed((7, 8), Color.WHITE):
        assert board.get((7, 8)) == Color.WHITE
    assert board == before

    with pytest.raises(RuntimeError):
        with board.placed((0, 0), Color.BLACK):
            raise RuntimeError("boom")
    assert board == before


def test_copy_is_independent(make_board):
    board = make_board(black=[(1, 1)])
    clone = board.copy()
    clone.set((2, 2), Color.WHITE)
    assert board.is_empty((2, 2))
    assert board != clone


def test_lines_skip_short_diagonals():
    lines = list(Board().lines())
    # 15 rows, 15 columns, 11 diagonals and 11 anti-diagonals of length >= 5
    assert len(lines) == 52
    assert min(len(line) for line in lines) == 5


def test_nearby_mask_clips_at_the_corner(make_board):
    board = make_board(black=[(0, 0)])
    mask = board.nearby_mask(2)
    assert mask[:3, :3].all()
    assert mask.sum() == 9
    assert not mask[3, 0]


def test_segment_is_clipped_at_edges(make_board):
    board = make_board(black=[(0, 1)], white=[(0, 2)])
    assert board.segment((0, 0), (0, 1)) == [0, 1, 2, 0, 0]
    assert len(board.segment((7, 7), (1, 1))) == 9
