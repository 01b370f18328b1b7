import logging
from typing import Mapping

import numpy as np

from .board import Board
from .config import QUICK_EVAL_BLOCK_FACTOR, QUICK_EVAL_SELF_FACTOR, Settings
from .pattern import encode_cells, encode_line, score_line
from .types import Color, DIRECTIONS, Move, Pattern, VALUE_EVAL_MAX, VALUE_EVAL_MIN

logger = logging.getLogger(__name__)


class Evaluator:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.weights = settings.pattern_weights

    def line_score(self, board: Board, player: Color) -> float:
        """
        Sum of pattern scores for `player` over every row, column and diagonal.
        """
        return sum(score_line(encode_cells(line, player), self.weights) for line in board.lines())

    def evaluate_board(self, board: Board, player: Color) -> float:
        opp = player.opposite()
        own_score = self.line_score(board, player)
        opp_score = self.line_score(board, opp)
        total_score = own_score - opp_score * self.settings.opponent_threat
        # Clamped so that a five found at a leaf never outranks a win found by the search
        total_score = float(np.clip(total_score, VALUE_EVAL_MIN, VALUE_EVAL_MAX))
        logger.debug(f"Eval for {player.name}: own={own_score}, opp={opp_score}, total={total_score}")
        return total_score

    def local_score(self, board: Board, pos: Move, player: Color) -> float:
        return sum(score_line(encode_line(board, pos, d, player), self.weights) for d in DIRECTIONS)

    def quick_evaluate_position(self, board: Board, pos: Move, player: Color) -> float:
        """
        Value of playing `pos`: our shapes through the cell, counted double, plus the
        damped value of denying the cell to the opponent.
        """
        opp = player.opposite()
        with board.placed(pos, player):
            score = self.local_score(board, pos, player) * QUICK_EVAL_SELF_FACTOR
        with board.placed(pos, opp):
            score += self.local_score(board, pos, opp) * QUICK_EVAL_BLOCK_FACTOR
        return score

    def pattern_score(self, counts: Mapping[Pattern, int]) -> float:
        return sum(self.weights[pattern.value] * n for pattern, n in counts.items())
