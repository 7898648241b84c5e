"""
Evaluation module for Minefield agents.
"""
from .evaluator import EpisodeStats, Evaluator

__all__ = [
    "EpisodeStats",
    "Evaluator",
]
