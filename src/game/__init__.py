"""Game engine module for Block Blast."""
from .pieces import Shape, Piece, SHAPES, COLORS, get_shape_by_name, get_all_shapes, make_piece
from .board import Board, Cell
from .config import GameConfig, load_config, load_game_config
from .engine import GameEngine, GameState, GameStatus, MoveResult, RejectReason

__all__ = [
    "Shape",
    "Piece",
    "SHAPES",
    "COLORS",
    "get_shape_by_name",
    "get_all_shapes",
    "make_piece",
    "Board",
    "Cell",
    "GameConfig",
    "load_config",
    "load_game_config",
    "GameEngine",
    "GameState",
    "GameStatus",
    "MoveResult",
    "RejectReason",
]
