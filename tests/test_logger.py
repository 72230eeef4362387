"""
Tests for session logging.
"""
import json
import pytest
import numpy as np
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game.engine import GameEngine, GameStatus, RejectReason, play_random_game
from game.pieces import make_piece, SINGLE
from utils.logger import SessionLogger, MetricsTracker, convert_to_serializable


class TestConvert:
    """Test JSON conversion."""

    def test_numpy_types(self):
        data = {'a': np.int64(3), 'b': np.float32(0.5), 'c': np.array([1, 2]), 'd': np.bool_(True)}
        assert convert_to_serializable(data) == {'a': 3, 'b': 0.5, 'c': [1, 2], 'd': True}

    def test_enums(self):
        assert convert_to_serializable(GameStatus.GAME_OVER) == "game_over"
        assert convert_to_serializable([RejectReason.NOT_IN_QUEUE]) == ["not_in_queue"]


class TestSessionLogger:
    """Test the JSONL event log."""

    def test_log_writes_jsonl(self, tmp_path):
        logger = SessionLogger(str(tmp_path), "test")
        logger.log("place", row=np.int64(1), col=2)

        lines = logger.log_file.read_text().strip().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record['event'] == "place"
        assert record['row'] == 1
        assert record['step'] == 1

    def test_engine_events(self, tmp_path):
        logger = SessionLogger(str(tmp_path), "engine")
        engine = GameEngine(seed=0, logger=logger)
        piece = make_piece(SINGLE, "red")
        engine._queue = [piece]

        engine.place(make_piece(SINGLE, "blue"), 0, 0)
        engine.place(piece, 0, 0)

        events = [r['event'] for r in logger.read_events()]
        assert events == ["reset", "reject", "place", "refill"]
        reject = logger.read_events("reject")[0]
        assert reject['reason'] == "not_in_queue"
        place = logger.read_events("place")[0]
        assert place['piece'] == {'id': piece.id, 'shape': "SINGLE", 'color': "red"}

    def test_clear_and_game_over_events(self, tmp_path):
        logger = SessionLogger(str(tmp_path), "clear")
        stats = play_random_game(seed=5, logger=logger)

        assert logger.event_counts['game_over'] == 1
        assert logger.event_counts['place'] == stats['moves_made']
        cleared = sum(r['rows'] + r['cols'] for r in logger.read_events("clear"))
        assert cleared == stats['total_lines_cleared']

    def test_save_summary(self, tmp_path):
        logger = SessionLogger(str(tmp_path), "summary")
        logger.log("reset")
        path = logger.save_summary({'score': np.int64(300)})

        summary = json.loads(path.read_text())
        assert summary['events'] == {'reset': 1}
        assert summary['score'] == 300

    def test_read_events_before_logging(self, tmp_path):
        logger = SessionLogger(str(tmp_path), "empty")
        assert logger.read_events() == []


class TestMetricsTracker:
    """Test rolling statistics."""

    def test_summary(self):
        tracker = MetricsTracker(window_size=3)
        for value in [1, 2, 3, 4]:
            tracker.add('score', value)

        summary = tracker.get_summary('score')
        assert summary['mean'] == pytest.approx(3.0)
        assert summary['min'] == 2.0
        assert summary['max'] == 4.0
        assert summary['last'] == 4.0

    def test_unknown_metric(self):
        tracker = MetricsTracker()
        assert tracker.get_mean('missing') == 0.0

    def test_reset(self):
        tracker = MetricsTracker()
        tracker.add('x', 1)
        tracker.reset()
        assert tracker.get_all_summaries() == {}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
