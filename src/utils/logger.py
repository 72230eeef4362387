"""
Logging utilities for game sessions.
"""
from typing import Dict, Any, Optional, List
from pathlib import Path
import json
import time
from datetime import datetime
from collections import defaultdict, Counter
from enum import Enum
import numpy as np


def convert_to_serializable(obj):
    """Convert numpy and enum types to Python types for JSON serialization."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.bool_):
        return bool(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, Enum):
        return obj.value
    elif isinstance(obj, dict):
        return {k: convert_to_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [convert_to_serializable(i) for i in obj]
    return obj


class SessionLogger:
    """
    Append-only JSONL log of engine events.
    """

    def __init__(self, log_dir: str, name: str = "session"):
        """
        Initialize logger.

        Args:
            log_dir: Directory to save logs
            name: Name of the session
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.name = name
        self.start_time = time.time()

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"{name}_{timestamp}.jsonl"

        self.event_counts: Counter = Counter()
        self.step = 0

    def log(self, event: str, **fields: Any) -> None:
        """
        Append one event record.

        Args:
            event: Event name (reset, place, reject, clear, refill, game_over)
            **fields: Event payload
        """
        self.step += 1
        self.event_counts[event] += 1

        record = {
            'step': self.step,
            'time': time.time() - self.start_time,
            'timestamp': datetime.now().isoformat(),
            'event': event,
            **fields,
        }
        record = convert_to_serializable(record)

        with open(self.log_file, 'a') as f:
            f.write(json.dumps(record) + '\n')

    def read_events(self, event: Optional[str] = None) -> List[Dict[str, Any]]:
        """Read back logged records, optionally filtered by event name."""
        if not self.log_file.exists():
            return []
        with open(self.log_file, 'r') as f:
            records = [json.loads(line) for line in f if line.strip()]
        if event is not None:
            records = [r for r in records if r['event'] == event]
        return records

    def print_metrics(self, metrics: Dict[str, Any]) -> None:
        """Print metrics to console."""
        elapsed = time.time() - self.start_time
        hours = int(elapsed // 3600)
        minutes = int((elapsed % 3600) // 60)
        seconds = int(elapsed % 60)

        print(f"\n[Step {self.step:,}] [{hours:02d}:{minutes:02d}:{seconds:02d}]")
        for key, value in metrics.items():
            if isinstance(value, float):
                print(f"  {key}: {value:.4f}")
            else:
                print(f"  {key}: {value}")

    def save_summary(self, extra: Optional[Dict[str, Any]] = None) -> Path:
        """Save a summary of the session."""
        summary = {
            'name': self.name,
            'total_events': self.step,
            'total_time': time.time() - self.start_time,
            'events': dict(self.event_counts),
        }
        if extra:
            summary.update(convert_to_serializable(extra))

        summary_file = self.log_dir / f"{self.name}_summary.json"
        with open(summary_file, 'w') as f:
            json.dump(summary, f, indent=2)
        return summary_file


class MetricsTracker:
    """
    Track running statistics for metrics.
    """

    def __init__(self, window_size: int = 100):
        """
        Initialize metrics tracker.

        Args:
            window_size: Size of rolling window for statistics
        """
        self.window_size = window_size
        self.metrics: Dict[str, List[float]] = defaultdict(list)

    def add(self, name: str, value: float) -> None:
        """Add a value to a metric."""
        self.metrics[name].append(value)
        if len(self.metrics[name]) > self.window_size:
            self.metrics[name].pop(0)

    def get_mean(self, name: str) -> float:
        values = self.metrics.get(name, [])
        return float(np.mean(values)) if values else 0.0

    def get_std(self, name: str) -> float:
        values = self.metrics.get(name, [])
        return float(np.std(values)) if values else 0.0

    def get_min(self, name: str) -> float:
        values = self.metrics.get(name, [])
        return float(np.min(values)) if values else 0.0

    def get_max(self, name: str) -> float:
        values = self.metrics.get(name, [])
        return float(np.max(values)) if values else 0.0

    def get_last(self, name: str) -> float:
        values = self.metrics.get(name, [])
        return float(values[-1]) if values else 0.0

    def get_summary(self, name: str) -> Dict[str, float]:
        """Get summary statistics for a metric."""
        return {
            'mean': self.get_mean(name),
            'std': self.get_std(name),
            'min': self.get_min(name),
            'max': self.get_max(name),
            'last': self.get_last(name),
        }

    def get_all_summaries(self) -> Dict[str, Dict[str, float]]:
        return {name: self.get_summary(name) for name in self.metrics}

    def reset(self) -> None:
        """Reset all metrics."""
        self.metrics.clear()
