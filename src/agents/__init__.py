"""
Minefield agents module.

Provides agents that play the Minefield environment:
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
