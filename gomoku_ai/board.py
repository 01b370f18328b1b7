from contextlib import contextmanager
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .config import BOARD_SIZE, LINE_HALF_LENGTH, WIN_LENGTH
from .types import Color, Move


class Board:
    """
    Square grid of cell states stored as a numpy int8 array indexed [row, col].
    """
    def __init__(self, board_size: int = BOARD_SIZE):
        self.size = board_size
        self.cells = np.zeros((board_size, board_size), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from a raw snapshot such as [[0, 1, 2, ...], ...].
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board snapshot must be {BOARD_SIZE}x{BOARD_SIZE}")
        board = cls(BOARD_SIZE)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value not in (Color.EMPTY, Color.BLACK, Color.WHITE):
                    raise ValueError(f"Invalid cell value {value!r} at ({r}, {c})")
                board.cells[r, c] = int(value)
        return board

    def to_rows(self) -> List[List[int]]:
        return self.cells.tolist()

    def copy(self) -> 'Board':
        new_board = Board(self.size)
        new_board.cells = self.cells.copy()
        return new_board

    def __eq__(self, other):
        if isinstance(other, Board):
            return self.size == other.size and np.array_equal(self.cells, other.cells)
        return NotImplemented

    def _is_valid_pos(self, pos: Move) -> bool:
        return 0 <= pos[0] < self.size and 0 <= pos[1] < self.size

    def _check_pos(self, pos: Move):
        if not self._is_valid_pos(pos):
            raise IndexError(f"Position {pos} is outside the {self.size}x{self.size} board")

    def get(self, pos: Move) -> Color:
        self._check_pos(pos)
        return Color(int(self.cells[pos[0], pos[1]]))

    def set(self, pos: Move, color: Color):
        self._check_pos(pos)
        self.cells[pos[0], pos[1]] = int(color)

    def is_empty(self, pos: Move) -> bool:
        return self.get(pos) == Color.EMPTY

    def is_full(self) -> bool:
        return not (self.cells == Color.EMPTY.value).any()

    def is_blank(self) -> bool:
        return not self.cells.any()

    def stone_count(self, color: Color) -> int:
        return int(np.count_nonzero(self.cells == int(color)))

    @contextmanager
    def placed(self, pos: Move, color: Color):
        """
        Temporarily put `color` on `pos`; the previous cell value is restored on exit,
        including when the body breaks out early or raises.
        """
        previous = self.get(pos)
        self.set(pos, color)
        try:
            yield self
        finally:
            self.cells[pos[0], pos[1]] = int(previous)

    def nearby_mask(self, distance: int) -> np.ndarray:
        """
        Boolean mask of cells within Chebyshev `distance` of any stone.
        """
        mask = np.zeros_like(self.cells, dtype=bool)
        for row, col in np.argwhere(self.cells != Color.EMPTY.value):
            mask[max(0, row - distance):row + distance + 1, max(0, col - distance):col + distance + 1] = True
        return mask

    def segment(self, pos: Move, direction: Tuple[int, int], half_length: int = LINE_HALF_LENGTH) -> List[int]:
        """
        Cells along `direction` from -half_length to +half_length around `pos`, clipped at the edges.
        """
        self._check_pos(pos)
        row, col = pos
        line = []
        for i in range(-half_length, half_length + 1):
            r, c = row + i * direction[0], col + i * direction[1]
            if 0 <= r < self.size and 0 <= c < self.size:
                line.append(int(self.cells[r, c]))
        return line

    def lines(self) -> Iterator[np.ndarray]:
        """
        Every row, column, diagonal and anti-diagonal long enough to hold five stones.
        """
        for r in range(self.size):
            yield self.cells[r, :]
        for c in range(self.size):
            yield self.cells[:, c]
        flipped = np.fliplr(self.cells)
        limit = self.size - WIN_LENGTH
        for offset in range(-limit, limit + 1):
            yield np.diagonal(self.cells, offset)
        for offset in range(-limit, limit + 1):
            yield np.diagonal(flipped, offset)

    def __str__(self):
        symbols = {Color.EMPTY: '.', Color.BLACK: 'X', Color.WHITE: 'O'}
        header = '    ' + ' '.join(f"{c:>2}" for c in range(self.size))
        rows = [header]
        for r in range(self.size):
            rows.append(f"{r:>2}  " + ' '.join(f"{symbols[Color(int(v))]:>2}" for v in self.cells[r]))
        return '\n'.join(rows)
