import time
import logging
from typing import Any, List, Mapping, Optional, Union
from .types import Color, LogEntry, Outcome, SearchResult, SCORE_INFINITE, WIN_SCORE
from .board import Board
from .config import Settings
from .eval import Evaluator
from .movegen import CandidateGenerator
from .wincheck import check_winner

logger = logging.getLogger(__name__)

class SearchThread:
    """
    Holds what one search needs: the board and a fixed snapshot of the settings.
    """
    def __init__(self, board: Board, settings: Settings):
        self.board = board
        self.settings = settings
        self.evaluator = Evaluator(settings)
        self.generator = CandidateGenerator(settings, self.evaluator)

class ABSearcher:
    """
    Fixed-depth negamax search with alpha-beta pruning.
    """
    def __init__(self, settings: Union[Settings, Mapping[str, Any], None] = None):
        self.settings = Settings()
        self.configure(settings)
        self.search_nodes = 0
        self.pruning_count = 0
        self.logs: List[LogEntry] = []

    def configure(self, settings: Union[Settings, Mapping[str, Any], None]):
        """
        Replace the settings used from the next search on.
        """
        if settings is None:
            settings = Settings()
        elif not isinstance(settings, Settings):
            settings = Settings.from_dict(settings)
        self.settings = settings
        logger.debug(f"Configured {settings}")

    def check_winner(self, board: Board) -> Outcome:
        return check_winner(board)

    def _log(self, message: str, type: str = 'info'):
        self.logs.append(LogEntry(message, type))
        logger.debug(message)

    def find_best_move(self, board: Board, player: Color) -> Optional[SearchResult]:
        """
        Search `board` for `player` and return the best move found, or None when there
        is nothing to search (no stone to play next to, or the game is already over).
        The board is left exactly as it was given.
        """
        player = Color(player)
        thread = SearchThread(board, self.settings)
        self.search_nodes = 1  # the root itself
        self.pruning_count = 0
        self.logs = []
        start_time = time.perf_counter()

        outcome = check_winner(board)
        if outcome != Outcome.CONTINUE:
            self._log(f"Game already over ({outcome.name}), nothing to search", 'warning')
            return None

        candidates = thread.generator.generate(board, player)
        self._log(f"Generated {len(candidates)} candidate moves")
        if not candidates:
            return None

        best_move = None
        best_score = -SCORE_INFINITE
        alpha = -SCORE_INFINITE
        beta = SCORE_INFINITE
        opp = player.opposite()

        for move in candidates:
            with board.placed(move, player):
                score = -self._alphabeta(thread, thread.settings.search_depth - 1, -beta, -alpha, opp)
            self._log(f"Evaluated {move}: score {score}")
            if score > best_score:
                best_score = score
                best_move = move
                alpha = max(alpha, score)

        search_time = (time.perf_counter() - start_time) * 1000
        summary = (f"Search done: best move {best_move}, score {best_score}, time {search_time:.0f}ms, "
                   f"nodes {self.search_nodes}, prunings {self.pruning_count}")
        self._log(summary)
        logger.info(summary)
        return SearchResult(best_move, best_score, self.search_nodes, self.pruning_count, search_time, self.logs)

    def alpha_beta(self, board: Board, depth: int, alpha: float, beta: float, player: Color) -> float:
        """
        Score of `board` from `player`'s point of view, searched `depth` plies deep.
        """
        return self._alphabeta(SearchThread(board, self.settings), depth, alpha, beta, Color(player))

    def _alphabeta(self, thread: SearchThread, depth: int, alpha: float, beta: float, player: Color) -> float:
        self.search_nodes += 1
        board = thread.board

        if depth <= 0:
            return thread.evaluator.evaluate_board(board, player)

        # Remaining depth is added so that quicker wins and slower losses score better
        winner = check_winner(board).winner
        if winner == player:
            return WIN_SCORE + depth
        if winner is not None:
            return -WIN_SCORE - depth

        candidates = thread.generator.generate(board, player)
        if not candidates:
            return 0

        max_score = -SCORE_INFINITE
        opp = player.opposite()
        for move in candidates:
            with board.placed(move, player):
                score = -self._alphabeta(thread, depth - 1, -beta, -alpha, opp)
            max_score = max(max_score, score)
            alpha = max(alpha, score)
            if alpha >= beta:
                self.pruning_count += 1
                break

        return max_score
