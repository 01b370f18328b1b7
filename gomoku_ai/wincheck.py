"""
Terminal state detection: five in a row for either side, or a full board.
"""
from .board import Board
from .pattern import OWN, encode_cells
from .types import Color, Outcome

FIVE_IN_ROW = OWN * 5


def has_five(board: Board, player: Color) -> bool:
    """
    True if `player` has at least five consecutive stones on any axis.
    Overlines count as a win.
    """
    return any(FIVE_IN_ROW in encode_cells(line, player) for line in board.lines())


def check_winner(board: Board) -> Outcome:
    # Both sides are checked before a draw is declared
    for color in (Color.BLACK, Color.WHITE):
        if has_five(board, color):
            return Outcome.win_for(color)
    if board.is_full():
        return Outcome.DRAW
    return Outcome.CONTINUE
