"""
Block Blast Board Renderer.

Provides ASCII visualization of the engine state for the terminal front end.
"""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import os

from .board import Board
from .pieces import Piece


class Renderer:
    """
    ASCII renderer for Block Blast game.

    Filled cells show a letter for their color.
    """

    EMPTY = "·"
    PREVIEW = "○"
    COLOR_GLYPHS: Dict[str, str] = {
        "red": "R",
        "blue": "B",
        "green": "G",
        "yellow": "Y",
        "purple": "P",
        "pink": "K",
        "indigo": "I",
        "orange": "O",
    }

    def cell_glyph(self, board: Board, row: int, col: int) -> str:
        cell = board.get_cell(row, col)
        if not cell.filled:
            return self.EMPTY
        return self.COLOR_GLYPHS.get(cell.color_id, "█")

    def render_board(
        self,
        board: Board,
        highlight: Iterable[Tuple[int, int]] = (),
        show_coords: bool = True,
    ) -> str:
        """
        Render the board as ASCII art.

        Args:
            board: The board to render
            highlight: Cells drawn as a placement preview
            show_coords: Whether to show row/column numbers

        Returns:
            String representation of the board
        """
        highlight = set(highlight)
        width = len(str(board.size - 1))
        lines = []

        if show_coords:
            lines.append(" " * (width + 1) + " ".join(str(i % 10) for i in range(board.size)))
            lines.append(" " * (width + 1) + "-" * (board.size * 2 - 1))

        for row in range(board.size):
            glyphs = []
            for col in range(board.size):
                if (row, col) in highlight:
                    glyphs.append(self.PREVIEW)
                else:
                    glyphs.append(self.cell_glyph(board, row, col))
            prefix = f"{row:>{width}}|" if show_coords else ""
            lines.append(prefix + " ".join(glyphs))

        if show_coords:
            lines.append(" " * (width + 1) + "-" * (board.size * 2 - 1))

        return "\n".join(lines)

    def render_piece(self, piece: Piece) -> str:
        """Render a piece using its color glyph."""
        glyph = self.COLOR_GLYPHS.get(piece.color_id, "□")
        return "\n".join(
            " ".join(glyph if cell else " " for cell in row).rstrip()
            for row in piece.shape.cells
        )

    def render_pieces(self, pieces: Sequence[Piece]) -> str:
        """
        Render the queue side by side with index headers.
        """
        if not pieces:
            return "(no pieces)"

        column_width = max(max(p.width * 2 + 4, len(p.name) + 4) for p in pieces)
        max_height = max(p.height for p in pieces)

        lines = ["  ".join(f"[{i}] {p.name}".ljust(column_width) for i, p in enumerate(pieces))]
        for row in range(max_height):
            parts = []
            for piece in pieces:
                glyph = self.COLOR_GLYPHS.get(piece.color_id, "□")
                if row < piece.height:
                    part = " ".join(glyph if cell else " " for cell in piece.shape.cells[row])
                else:
                    part = ""
                parts.append(part.ljust(column_width))
            lines.append("  ".join(parts).rstrip())

        return "\n".join(lines)

    def render_game_state(self, engine, highlight: Optional[List[Tuple[int, int]]] = None) -> str:
        """
        Render complete game state.

        Args:
            engine: The GameEngine to draw
            highlight: Optional preview cells

        Returns:
            Complete game state visualization
        """
        lines = []
        lines.append("=" * 40)
        lines.append(f"Score: {engine.score:,}  |  Moves: {engine.moves_made}")
        lines.append("=" * 40)
        lines.append("")
        lines.append(self.render_board(engine.board, highlight or ()))
        lines.append("")
        lines.append("Available Pieces:")
        lines.append(self.render_pieces(engine.queue))
        lines.append("=" * 40)

        return "\n".join(lines)


def clear_screen():
    """Clear the terminal screen."""
    os.system('cls' if os.name == 'nt' else 'clear')
