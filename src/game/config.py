"""
Game configuration.

Defaults match the standard rules: a 10x10 grid, batches of 3 pieces and
100 points per cleared line.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
import yaml


@dataclass(frozen=True)
class GameConfig:
    """Rule constants for a game session."""
    grid_size: int = 10
    pieces_per_turn: int = 3
    points_per_line: int = 100

    def __post_init__(self):
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be >= 1, got {self.grid_size}")
        if self.pieces_per_turn < 1:
            raise ValueError(f"pieces_per_turn must be >= 1, got {self.pieces_per_turn}")
        if self.points_per_line < 0:
            raise ValueError(f"points_per_line must be >= 0, got {self.points_per_line}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GameConfig":
        """
        Build a config from a parsed YAML document.

        Only the ``game`` section is read; missing keys keep their defaults.
        """
        game = (data or {}).get('game') or {}
        defaults = cls()
        return cls(
            grid_size=int(game.get('grid_size', defaults.grid_size)),
            pieces_per_turn=int(game.get('pieces_per_turn', defaults.pieces_per_turn)),
            points_per_line=int(game.get('points_per_line', defaults.points_per_line)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'game': asdict(self)}


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def load_game_config(config_path: Optional[str] = None) -> GameConfig:
    """Load the game section of a YAML file, or the defaults when no path is given."""
    if config_path is None:
        return GameConfig()
    return GameConfig.from_dict(load_config(config_path))
