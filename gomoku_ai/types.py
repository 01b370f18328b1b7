from datetime import datetime
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

Move = Tuple[int, int]

# Axis directions: horizontal, vertical, diagonal, anti-diagonal
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (1, 1), (1, -1)]


# Color representation, values match the raw board snapshots handed in by callers
class Color(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> 'Color':
        if self == Color.BLACK:
            return Color.WHITE
        if self == Color.WHITE:
            return Color.BLACK
        raise ValueError("EMPTY has no opposite side")


# Shape classes in precedence order, value is the key in the weight table
class Pattern(Enum):
    FIVE = 'live_five'             # 11111
    LIVE_FOUR = 'live_four'        # 011110
    DEAD_FOUR = 'dead_four'        # 211110, 10111, 11011
    LIVE_THREE = 'live_three'      # 01110, 010110
    DEAD_THREE = 'dead_three'      # 211100, 10011, 10101
    LIVE_TWO = 'live_two'          # 00110, 01010
    DEAD_TWO = 'dead_two'          # 2110, positional classifier only


class Outcome(IntEnum):
    CONTINUE = -1
    DRAW = 0
    BLACK_WINS = 1
    WHITE_WINS = 2

    @staticmethod
    def win_for(color: Color) -> 'Outcome':
        return Outcome(int(color))

    @property
    def winner(self) -> Optional[Color]:
        if self in (Outcome.BLACK_WINS, Outcome.WHITE_WINS):
            return Color(int(self))
        return None


# Terminal scores for the search
WIN_SCORE = 10000
# Heuristic scores stay strictly inside the terminal range
VALUE_EVAL_MAX = WIN_SCORE - 1
VALUE_EVAL_MIN = -VALUE_EVAL_MAX
SCORE_INFINITE = float('inf')


class LogEntry:
    """
    One human-readable line produced during a search.
    """
    def __init__(self, message: str, type: str = 'info', timestamp: Optional[str] = None):
        self.timestamp = timestamp or datetime.now().strftime('%H:%M:%S')
        self.message = message
        self.type = type

    def __repr__(self):
        return f"LogEntry({self.timestamp} [{self.type}] {self.message})"


class SearchResult:
    """
    Outcome of one top-level search: the chosen move, its score and the search statistics.
    """
    def __init__(self, move: Optional[Move], score: float, search_nodes: int, pruning_count: int,
                 search_time: float, logs: List[LogEntry]):
        self.move = move
        self.score = score
        self.search_nodes = search_nodes
        self.pruning_count = pruning_count
        self.search_time = search_time  # milliseconds
        self.logs = logs

    def __repr__(self):
        return (f"SearchResult(move={self.move}, score={self.score}, nodes={self.search_nodes}, "
                f"prunings={self.pruning_count}, time={self.search_time:.1f}ms)")
