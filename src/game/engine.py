"""
Block Blast Game Engine.

This module implements the complete game logic including:
- Game state management
- Piece generation (batches of 3 random pieces)
- Line-clear scoring
- Game over detection
- Move validation and piece selection/preview
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple, Optional, Dict, Any
from enum import Enum
import numpy as np

from .board import Board
from .config import GameConfig
from .pieces import Piece, generate_pieces, find_piece

if TYPE_CHECKING:
    from utils.logger import SessionLogger


class GameStatus(Enum):
    """Game status enumeration."""
    PLAYING = "playing"
    GAME_OVER = "game_over"


class RejectReason(Enum):
    """Why a placement was refused."""
    GAME_OVER = "game_over"
    NOT_IN_QUEUE = "not_in_queue"
    ILLEGAL_PLACEMENT = "illegal_placement"


@dataclass
class MoveResult:
    """Result of a placement attempt."""
    success: bool
    reason: Optional[RejectReason] = None
    piece_placed: Optional[Piece] = None
    position: Optional[Tuple[int, int]] = None
    blocks_placed: int = 0
    rows_cleared: int = 0
    cols_cleared: int = 0
    lines_cleared: int = 0
    score_gained: int = 0
    refilled: bool = False
    game_over: bool = False


@dataclass
class GameState:
    """Read-only snapshot of a game for display and logging."""
    board: np.ndarray
    queue: Tuple[Piece, ...]
    score: int
    moves_made: int
    status: GameStatus

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary of plain Python types."""
        return {
            "board": self.board.tolist(),
            "queue": [piece.to_dict() for piece in self.queue],
            "score": self.score,
            "moves_made": self.moves_made,
            "status": self.status.value,
        }


class GameEngine:
    """
    Block Blast game engine.

    Owns the board, the piece queue, the score and the game-over flag.
    Callers check ``can_place`` (for previews) and commit with ``place``;
    invalid commands are rejected without touching state.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        logger: Optional["SessionLogger"] = None,
    ):
        """
        Initialize a new game.

        Args:
            config: Rule constants (defaults to the standard 10x10 game)
            seed: Random seed for reproducibility
            logger: Optional event sink with a ``log(event, **fields)`` method
        """
        self.config = config or GameConfig()
        self.board_size = self.config.grid_size
        self.board = Board(self.board_size)
        self.rng = np.random.default_rng(seed)
        self.logger = logger

        self._queue: List[Piece] = []
        self.score = 0
        self.status = GameStatus.PLAYING
        self.moves_made = 0
        self.total_lines_cleared = 0
        self.total_blocks_placed = 0

        self.selected_piece: Optional[Piece] = None

        self._queue = self.generate_pieces()
        self._log("reset", queue=[p.to_dict() for p in self._queue])

    def _log(self, event: str, **fields: Any) -> None:
        if self.logger is not None:
            self.logger.log(event, **fields)

    def reset(self, seed: Optional[int] = None) -> GameState:
        """
        Reset the game to initial state.

        Args:
            seed: New random seed (optional)

        Returns:
            Initial game state
        """
        if seed is not None:
            self.rng = np.random.default_rng(seed)

        self.board.reset()
        self.score = 0
        self.status = GameStatus.PLAYING
        self.moves_made = 0
        self.total_lines_cleared = 0
        self.total_blocks_placed = 0
        self.selected_piece = None

        self._queue = self.generate_pieces()
        self._log("reset", queue=[p.to_dict() for p in self._queue])

        return self.get_state()

    def generate_pieces(self) -> List[Piece]:
        """Draw a fresh batch of pieces. Does not touch the queue."""
        return generate_pieces(self.config.pieces_per_turn, self.rng)

    @property
    def queue(self) -> Tuple[Piece, ...]:
        """Pieces currently available, in display order."""
        return tuple(self._queue)

    def get_piece(self, piece_id: int) -> Optional[Piece]:
        """Look up a queued piece by id."""
        return find_piece(self._queue, piece_id)

    def _is_queued(self, piece: Piece) -> bool:
        # Same id is not enough: shape and color must match the queued piece too
        return find_piece(self._queue, piece.id) == piece

    def can_place(self, piece: Piece, row: int, col: int) -> bool:
        """
        Check whether a piece fits at the given anchor on the current board.

        Pure predicate; safe for previews and exhaustive searches.
        """
        return self.board.can_place(piece, row, col)

    def place(self, piece: Piece, row: int, col: int) -> MoveResult:
        """
        Place a queued piece with its top-left anchor at (row, col).

        Args:
            piece: A piece from the current queue
            row: Row to place the piece at
            col: Column to place the piece at

        Returns:
            MoveResult with details about the move. Rejected moves leave the
            game untouched and carry a ``reason``.
        """
        if self.status == GameStatus.GAME_OVER:
            return self._reject(piece, row, col, RejectReason.GAME_OVER)
        if not self._is_queued(piece):
            return self._reject(piece, row, col, RejectReason.NOT_IN_QUEUE)
        if not self.board.place_piece(piece, row, col):
            return self._reject(piece, row, col, RejectReason.ILLEGAL_PLACEMENT)

        self._queue = [p for p in self._queue if p.id != piece.id]
        if self.selected_piece is not None and self.selected_piece.id == piece.id:
            self.selected_piece = None
        self.moves_made += 1
        self.total_blocks_placed += piece.num_blocks
        self._log("place", piece=piece.to_dict(), row=row, col=col)

        score_before = self.score
        rows_cleared, cols_cleared = self.clear_lines()
        refilled = self.refill_if_empty()

        if self.check_game_over():
            self.status = GameStatus.GAME_OVER
            self.selected_piece = None
            self._log("game_over", score=self.score, moves_made=self.moves_made)

        return MoveResult(
            success=True,
            piece_placed=piece,
            position=(row, col),
            blocks_placed=piece.num_blocks,
            rows_cleared=rows_cleared,
            cols_cleared=cols_cleared,
            lines_cleared=rows_cleared + cols_cleared,
            score_gained=self.score - score_before,
            refilled=refilled,
            game_over=self.status == GameStatus.GAME_OVER,
        )

    def _reject(self, piece: Piece, row: int, col: int, reason: RejectReason) -> MoveResult:
        self._log("reject", piece=piece.to_dict(), row=row, col=col, reason=reason)
        return MoveResult(success=False, reason=reason, game_over=self.is_game_over())

    def clear_lines(self) -> Tuple[int, int]:
        """
        Clear every complete row and column and award points per line.

        Returns:
            Tuple of (rows_cleared, cols_cleared)
        """
        rows_cleared, cols_cleared = self.board.clear_lines()
        lines = rows_cleared + cols_cleared
        if lines == 0:
            return 0, 0

        gained = lines * self.config.points_per_line
        self.score += gained
        self.total_lines_cleared += lines
        self._log("clear", rows=rows_cleared, cols=cols_cleared, score_gained=gained)
        return rows_cleared, cols_cleared

    def refill_if_empty(self) -> bool:
        """Replace an empty queue with a new batch. Returns True if refilled."""
        if self._queue:
            return False
        self._queue = self.generate_pieces()
        self._log("refill", queue=[p.to_dict() for p in self._queue])
        return True

    def check_game_over(self) -> bool:
        """
        Check whether no queued piece fits anywhere on the board.

        An empty queue is never game over; it is waiting for a refill.
        """
        for piece in self._queue:
            if self.board.has_valid_placement(piece):
                return False
        return bool(self._queue)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.status == GameStatus.GAME_OVER

    def get_valid_moves(self) -> List[Tuple[Piece, int, int]]:
        """
        Get all valid moves as (piece, row, col) tuples.
        """
        valid_moves = []
        if self.status == GameStatus.GAME_OVER:
            return valid_moves
        for piece in self._queue:
            for row, col in self.board.get_valid_placements(piece):
                valid_moves.append((piece, row, col))
        return valid_moves

    # -------------------------------------------------------------------------
    # Selection / preview (drag state of an interactive front end)
    # -------------------------------------------------------------------------

    def select(self, piece: Piece) -> bool:
        """Pick up a queued piece. Returns False if it cannot be selected."""
        if self.status == GameStatus.GAME_OVER or not self._is_queued(piece):
            return False
        self.selected_piece = piece
        return True

    def clear_selection(self) -> None:
        self.selected_piece = None

    def preview(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Cells the selected piece would occupy at (row, col).

        Empty when nothing is selected or the piece does not fit there.
        """
        piece = self.selected_piece
        if piece is None or not self.board.can_place(piece, row, col):
            return []
        return [(row + dr, col + dc) for dr, dc in piece.blocks]

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def get_state(self) -> GameState:
        """Get the current game state."""
        return GameState(
            board=self.board.get_state(),
            queue=self.queue,
            score=self.score,
            moves_made=self.moves_made,
            status=self.status,
        )

    def get_statistics(self) -> Dict[str, Any]:
        """Get game statistics."""
        return {
            'score': self.score,
            'moves_made': self.moves_made,
            'total_lines_cleared': self.total_lines_cleared,
            'total_blocks_placed': self.total_blocks_placed,
            'board_fill_ratio': self.board.total_blocks / (self.board_size ** 2),
        }

    def __str__(self) -> str:
        """String representation of the game state."""
        lines = [str(self.board)]
        lines.append(f"\nScore: {self.score} | Moves: {self.moves_made} | "
                     f"Status: {self.status.value}")
        lines.append("\nAvailable pieces:")
        for i, piece in enumerate(self._queue):
            lines.append(f"  [{i}] {piece.name} ({piece.color_id})")
        return "\n".join(lines)


def play_random_game(
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None,
    logger: Optional["SessionLogger"] = None,
    max_moves: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Play a complete game with uniformly random legal moves.

    Args:
        seed: Random seed
        config: Rule constants
        logger: Optional event sink passed to the engine
        max_moves: Stop early after this many placements

    Returns:
        Dictionary with game statistics
    """
    engine = GameEngine(config=config, seed=seed, logger=logger)

    while not engine.is_game_over():
        if max_moves is not None and engine.moves_made >= max_moves:
            break
        valid_moves = engine.get_valid_moves()
        if not valid_moves:
            break
        piece, row, col = valid_moves[engine.rng.integers(len(valid_moves))]
        engine.place(piece, row, col)

    stats = engine.get_statistics()
    stats['game_over'] = engine.is_game_over()
    return stats
