"""Manufacturing performance scorer: heuristic 0-100 score from plant metrics."""

__version__ = "0.1.0"
