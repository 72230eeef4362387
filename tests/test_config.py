"""
Tests for game configuration.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game.config import GameConfig, load_config, load_game_config

DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "default.yaml"


class TestGameConfig:
    """Test the config dataclass."""

    def test_defaults(self):
        config = GameConfig()
        assert config.grid_size == 10
        assert config.pieces_per_turn == 3
        assert config.points_per_line == 100

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": 0},
        {"pieces_per_turn": 0},
        {"points_per_line": -1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_from_dict_partial(self):
        config = GameConfig.from_dict({'game': {'grid_size': 8}})
        assert config.grid_size == 8
        assert config.pieces_per_turn == 3

    def test_from_dict_empty(self):
        assert GameConfig.from_dict(None) == GameConfig()
        assert GameConfig.from_dict({'logging': {'enabled': True}}) == GameConfig()

    def test_to_dict_round(self):
        config = GameConfig(points_per_line=50)
        assert GameConfig.from_dict(config.to_dict()) == config


class TestLoading:
    """Test YAML loading."""

    def test_default_yaml_matches_defaults(self):
        assert load_game_config(str(DEFAULT_CONFIG)) == GameConfig()

    def test_default_yaml_sections(self):
        data = load_config(str(DEFAULT_CONFIG))
        assert data['play']['seed'] == 42
        assert data['logging']['enabled'] is False

    def test_load_custom(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("game:\n  grid_size: 6\n  points_per_line: 10\n")
        config = load_game_config(str(path))
        assert config.grid_size == 6
        assert config.points_per_line == 10

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == {}
        assert load_game_config(str(path)) == GameConfig()

    def test_load_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("game:\n  grid_size: 0\n")
        with pytest.raises(ValueError):
            load_game_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_no_path_gives_defaults(self):
        assert load_game_config() == GameConfig()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
