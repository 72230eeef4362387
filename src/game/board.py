"""
Block Blast Board Module.

This module implements the game board with:
- 10x10 grid representation with per-cell colors
- Piece placement validation
- Line clearing logic (rows and columns)
"""
from dataclasses import dataclass
from typing import List, Tuple, Set, Optional
import numpy as np

from .pieces import Piece, COLORS, color_code, color_from_code


@dataclass(frozen=True)
class Cell:
    """A single grid cell as seen by the presentation layer."""
    filled: bool
    color_id: Optional[str] = None


EMPTY_CELL = Cell(False, None)


class Board:
    """
    Represents the square Block Blast game board.

    The board is represented as a 2D numpy array where:
    - 0 = empty cell
    - k > 0 = filled cell whose color is COLORS[k - 1]
    """

    DEFAULT_SIZE = 10

    def __init__(self, size: int = DEFAULT_SIZE):
        """Initialize an empty board."""
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)
        self._total_blocks = 0

    def copy(self) -> "Board":
        """Create a deep copy of this board."""
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        new_board._total_blocks = self._total_blocks
        return new_board

    def reset(self) -> None:
        """Clear the board."""
        self.grid.fill(0)
        self._total_blocks = 0

    @property
    def total_blocks(self) -> int:
        """Return total number of filled blocks on the board."""
        return self._total_blocks

    @property
    def empty_cells(self) -> int:
        """Return number of empty cells."""
        return self.size * self.size - self._total_blocks

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        code = int(self.grid[row, col])
        if code == 0:
            return EMPTY_CELL
        return Cell(True, color_from_code(code))

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def is_filled(self, row: int, col: int) -> bool:
        return self.grid[row, col] != 0

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if coordinates are within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def can_place(self, piece: Piece, row: int, col: int) -> bool:
        """
        Check if a piece can be placed at the given position.

        Args:
            piece: The piece to place
            row: Row position for the piece's top-left anchor
            col: Column position for the piece's top-left anchor

        Returns:
            True if every block lands in bounds on an empty cell
        """
        size = self.size
        grid = self.grid
        for dr, dc in piece.blocks:
            r, c = row + dr, col + dc
            if r < 0 or r >= size or c < 0 or c >= size:
                return False
            if grid[r, c] != 0:
                return False
        return True

    def place_piece(self, piece: Piece, row: int, col: int) -> bool:
        """
        Stamp a piece's color onto the board.

        Returns:
            True if successful, False if placement is invalid (board unchanged)
        """
        if not self.can_place(piece, row, col):
            return False

        code = color_code(piece.color_id)
        for dr, dc in piece.blocks:
            self.grid[row + dr, col + dc] = code
        self._total_blocks += piece.num_blocks

        return True

    def get_valid_placements(self, piece: Piece) -> List[Tuple[int, int]]:
        """
        Get all valid anchor positions for a piece.

        Returns:
            List of (row, col) tuples where the piece can be placed
        """
        valid = []
        max_row = self.size - piece.height + 1
        max_col = self.size - piece.width + 1
        for row in range(max_row):
            for col in range(max_col):
                if self.can_place(piece, row, col):
                    valid.append((row, col))
        return valid

    def has_valid_placement(self, piece: Piece) -> bool:
        """Check if there's at least one valid placement for a piece."""
        max_row = self.size - piece.height + 1
        max_col = self.size - piece.width + 1
        for row in range(max_row):
            for col in range(max_col):
                if self.can_place(piece, row, col):
                    return True
        return False

    def find_complete_lines(self) -> Tuple[Set[int], Set[int]]:
        """
        Find all complete rows and columns.

        Both scans read the same grid, so a row and a column sharing a cell
        are each reported.

        Returns:
            Tuple of (complete_rows, complete_cols) as sets of indices
        """
        filled = self.grid != 0
        complete_rows = {int(r) for r in np.flatnonzero(filled.all(axis=1))}
        complete_cols = {int(c) for c in np.flatnonzero(filled.all(axis=0))}
        return complete_rows, complete_cols

    def clear_lines(self) -> Tuple[int, int]:
        """
        Clear all complete rows and columns.

        Returns:
            Tuple of (num_rows_cleared, num_cols_cleared)
        """
        complete_rows, complete_cols = self.find_complete_lines()
        if not complete_rows and not complete_cols:
            return 0, 0

        for row in complete_rows:
            self.grid[row, :] = 0
        for col in complete_cols:
            self.grid[:, col] = 0

        self._total_blocks = int(np.count_nonzero(self.grid))

        return len(complete_rows), len(complete_cols)

    def get_state(self) -> np.ndarray:
        """Get the board state as a numpy array."""
        return self.grid.copy()

    def set_state(self, state: np.ndarray) -> None:
        """Set the board state from a numpy array of color codes."""
        state = np.asarray(state, dtype=np.int8)
        if state.shape != (self.size, self.size):
            raise ValueError(
                f"Expected state of shape {(self.size, self.size)}, got {state.shape}"
            )
        if state.min() < 0 or state.max() > len(COLORS):
            raise ValueError(f"Cell codes must be in [0, {len(COLORS)}]")
        self.grid = state.copy()
        self._total_blocks = int(np.count_nonzero(state))

    def __str__(self) -> str:
        """Create a string visualization of the board."""
        lines = []
        lines.append("  " + " ".join(str(i) for i in range(self.size)))
        lines.append("  " + "-" * (self.size * 2 - 1))
        for row in range(self.size):
            row_str = f"{row}|"
            for col in range(self.size):
                cell = "█" if self.grid[row, col] != 0 else "·"
                row_str += cell + " "
            lines.append(row_str.rstrip())
        lines.append("  " + "-" * (self.size * 2 - 1))
        lines.append(f"Blocks: {self._total_blocks}, Empty: {self.empty_cells}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(size={self.size}, blocks={self._total_blocks})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return np.array_equal(self.grid, other.grid)
