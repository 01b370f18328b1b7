from typing import List, Tuple
from .board import Board
from .config import Settings
from .eval import Evaluator
from .types import Color
import logging

logger = logging.getLogger(__name__)

class ScoredMove:
    """
    Represents a move with an associated score for prioritization.
    """
    def __init__(self, pos: Tuple[int, int], score: float = 0.0):
        self.pos = pos
        self.score = score

    def __repr__(self):
        return f"ScoredMove({self.pos}, score={self.score})"

class CandidateGenerator:
    """
    Restricts the search to empty cells near existing stones, best first.
    """
    def __init__(self, settings: Settings, evaluator: Evaluator):
        self.settings = settings
        self.evaluator = evaluator

    def scored_moves(self, board: Board, player: Color) -> List[ScoredMove]:
        """
        Every empty cell within search_range of a stone, scored for `player` and sorted
        best first. Equal scores keep row-major scan order.
        """
        nearby = board.nearby_mask(self.settings.search_range)
        moves = []
        for row in range(board.size):
            for col in range(board.size):
                if not nearby[row, col] or board.cells[row, col] != Color.EMPTY:
                    continue
                pos = (row, col)
                moves.append(ScoredMove(pos, self.evaluator.quick_evaluate_position(board, pos, player)))
        moves.sort(key=lambda m: m.score, reverse=True)
        return moves

    def generate(self, board: Board, player: Color) -> List[Tuple[int, int]]:
        moves = self.scored_moves(board, player)[:self.settings.candidate_count]
        logger.debug(f"Candidates for {player.name}: {moves}")
        return [m.pos for m in moves]
