"""
Minefield game module.

Provides the 9x9 board engine, its console front end and a Gymnasium
environment.
"""
from .cell import Cell, CellKind
from .board import (
    Board,
    BoardConfig,
    GameState,
    Move,
    MoveMode,
    MoveOutcome,
    GRID_SIZE,
    CELL_COUNT,
    MAX_MINES,
)
from .errors import (
    MinefieldError,
    InvalidConfiguration,
    InvalidPosition,
    ParseError,
    GameOverError,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellKind",
    "Board",
    "BoardConfig",
    "GameState",
    "Move",
    "MoveMode",
    "MoveOutcome",
    "GRID_SIZE",
    "CELL_COUNT",
    "MAX_MINES",
    "MinefieldError",
    "InvalidConfiguration",
    "InvalidPosition",
    "ParseError",
    "GameOverError",
    "MinesweeperEnv",
]
