"""Immutable board snapshot and the X/O marks placed on it."""

from enum import Enum
from typing import Optional, Tuple


class Mark(str, Enum):
    """The two marks players place. X always moves first."""
    X = "X"
    O = "O"

    @classmethod
    def for_move(cls, move_index: int) -> "Mark":
        """Mark placed by the move that follows `move_index` moves."""
        return cls.X if move_index % 2 == 0 else cls.O

    def __str__(self):
        return self.value


Cell = Optional[Mark]

SYMMETRY_TRANSFORMS = (
    (0, False),  # identity
    (1, False),  # rot90
    (2, False),  # rot180
    (3, False),  # rot270
    (0, True),   # flip-x
    (1, True),   # rot90 + flip-x
    (2, True),   # rot180 + flip-x
    (3, True),   # rot270 + flip-x
)


class Board:
    def __init__(self, size=15, cells=None):
        # Cells are None (empty), Mark.X or Mark.O, stored row-major as tuples
        if cells is None:
            cells = tuple((None,) * size for _ in range(size))
        else:
            cells = tuple(tuple(row) for row in cells)
            if len(cells) != size or any(len(row) != size for row in cells):
                raise ValueError(f"cells must be a {size}x{size} grid")
        self._size = size
        self._cells = cells

    @classmethod
    def empty(cls, size=15):
        return cls(size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self._cells

    def __getitem__(self, row):
        return self._cells[row]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __hash__(self):
        return hash((self._size, self._cells))

    def __repr__(self):
        return f"Board(size={self._size}, marks={self.marks_count()})"

    def in_bounds(self, row, col):
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, row, col) -> Cell:
        return self._cells[row][col]

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self._cells[row][col] is None

    def place(self, row, col, mark):
        """Return a new board with `mark` at (row, col); raise if out of bounds or occupied."""
        if not isinstance(mark, Mark):
            raise ValueError("mark must be Mark.X or Mark.O")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self._cells[row][col] is not None:
            raise ValueError("cell already occupied")
        new_row = self._cells[row][:col] + (mark,) + self._cells[row][col + 1:]
        cells = self._cells[:row] + (new_row,) + self._cells[row + 1:]
        return Board(self._size, cells)

    def marks_count(self):
        return sum(1 for row in self._cells for cell in row if cell is not None)

    def diff(self, other):
        """List (row, col, before, after) for every cell that differs from `other`."""
        if self._size != other.size:
            raise ValueError("boards differ in size")
        changes = []
        for r in range(self._size):
            for c in range(self._size):
                before = other.get(r, c)
                after = self._cells[r][c]
                if before != after:
                    changes.append((r, c, before, after))
        return changes

    def rotated(self):
        """Board turned 90 degrees clockwise."""
        n = self._size
        return Board(n, [[self._cells[n - 1 - c][r] for c in range(n)] for r in range(n)])

    def mirrored(self):
        """Board flipped left to right."""
        return Board(self._size, [row[::-1] for row in self._cells])

    def transform(self, symmetry_id):
        """Apply one of the eight SYMMETRY_TRANSFORMS (rotation count, then optional flip)."""
        if symmetry_id < 0 or symmetry_id >= len(SYMMETRY_TRANSFORMS):
            raise ValueError(f"symmetry_id must be in [0, {len(SYMMETRY_TRANSFORMS) - 1}], got {symmetry_id}")
        turns, flip = SYMMETRY_TRANSFORMS[symmetry_id]
        board = self
        for _ in range(turns):
            board = board.rotated()
        return board.mirrored() if flip else board

    def to_text(self):
        """Render as rows of 'X', 'O' and '.' joined by newlines."""
        return "\n".join(
            "".join(cell.value if cell is not None else "." for cell in row)
            for row in self._cells
        )
