"""
Shape recognition along board lines.

Lines are encoded from one player's point of view over a three-symbol alphabet:
own stone '1', empty '0', foe or off-board '2'. Every encoded line is wrapped in
one '2' at each end so that edge-blocked shapes match the same rules as shapes
blocked by an opponent stone.
"""
import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .board import Board
from .types import Color, DIRECTIONS, Move, Pattern

logger = logging.getLogger(__name__)

OWN = '1'
EMPTY = '0'
BLOCK = '2'
CONSUMED = 'x'

# Ordered most specific first; a match consumes its own stones before weaker rules run
LINE_RULES: List[Tuple[Pattern, 're.Pattern']] = [
    (Pattern.FIVE, re.compile(r'11111')),
    (Pattern.LIVE_FOUR, re.compile(r'011110')),
    (Pattern.DEAD_FOUR, re.compile(r'211110|011112|10111|11011|11101')),
    (Pattern.LIVE_THREE, re.compile(r'01110|010110|011010')),
    (Pattern.DEAD_THREE, re.compile(r'211100|001112|211010|010112|210110|011012|10011|11001|10101')),
    (Pattern.LIVE_TWO, re.compile(r'00110|01100|01010|010010')),
]


def encode_cells(cells: Iterable[int], player: Color) -> str:
    """
    Encode a run of raw cell values for `player`, with boundary symbols at both ends.
    """
    own = int(player)
    body = ''.join(OWN if v == own else EMPTY if v == Color.EMPTY else BLOCK for v in cells)
    return BLOCK + body + BLOCK


def encode_line(board: Board, pos: Move, direction: Tuple[int, int], player: Color) -> str:
    """
    Local encoding: up to four cells either side of `pos` along `direction`.
    """
    return encode_cells(board.segment(pos, direction), player)


def _consume(line: str, start: int, end: int) -> str:
    return line[:start] + line[start:end].replace(OWN, CONSUMED) + line[end:]


def count_line_patterns(encoded: str) -> Dict[Pattern, int]:
    """
    Count shapes in an encoded line. Each rule is applied in turn and every match
    neutralises its own stones, so one physical shape is counted once.
    """
    counts = {pattern: 0 for pattern, _ in LINE_RULES}
    work = encoded
    for pattern, rule in LINE_RULES:
        if OWN not in work:
            break
        match = rule.search(work)
        while match is not None:
            counts[pattern] += 1
            work = _consume(work, match.start(), match.end())
            match = rule.search(work)
    return counts


def score_line(encoded: str, weights: Mapping[str, float]) -> float:
    return sum(weights[pattern.value] * n for pattern, n in count_line_patterns(encoded).items() if n)


def classify_direction(board: Board, pos: Move, direction: Tuple[int, int], player: Color) -> Optional[Pattern]:
    """
    Positional classification of the run through a placed stone along one axis.
    An end counts as blocked when it hits an opponent stone or the board edge.
    """
    dr, dc = direction
    count = 1
    blocked = 0
    for sign in (1, -1):
        r, c = pos[0] + sign * dr, pos[1] + sign * dc
        while True:
            if not (0 <= r < board.size and 0 <= c < board.size):
                blocked += 1
                break
            value = board.cells[r, c]
            if value == player:
                count += 1
                r, c = r + sign * dr, c + sign * dc
                continue
            if value != Color.EMPTY:
                blocked += 1
            break

    if count >= 5:
        return Pattern.FIVE
    if count == 4:
        return Pattern.LIVE_FOUR if blocked == 0 else Pattern.DEAD_FOUR
    if count == 3:
        return Pattern.LIVE_THREE if blocked == 0 else Pattern.DEAD_THREE
    if count == 2:
        return Pattern.LIVE_TWO if blocked == 0 else Pattern.DEAD_TWO
    return None


def empty_counts() -> Dict[Pattern, int]:
    return {p: 0 for p in Pattern}


def detect_position_patterns(board: Board, pos: Move, player: Color) -> Dict[Pattern, int]:
    counts = empty_counts()
    for direction in DIRECTIONS:
        pattern = classify_direction(board, pos, direction, player)
        if pattern is not None:
            counts[pattern] += 1
    return counts


def detect_all_patterns(board: Board, player: Color) -> Dict[Pattern, int]:
    """
    Per-stone shape tally for every stone of `player`: a run of n stones is seen
    once from each of its n stones.
    """
    counts = empty_counts()
    for row in range(board.size):
        for col in range(board.size):
            if board.cells[row, col] != player:
                continue
            for pattern, n in detect_position_patterns(board, (row, col), player).items():
                counts[pattern] += n
    logger.debug(f"Pattern tally for {player.name}: { {p.name: n for p, n in counts.items() if n} }")
    return counts
