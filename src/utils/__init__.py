"""Utility functions for Block Blast."""
from .logger import SessionLogger, MetricsTracker, convert_to_serializable

__all__ = [
    "SessionLogger",
    "MetricsTracker",
    "convert_to_serializable",
]
