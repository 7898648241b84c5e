"""
Exceptions raised by the Minefield engine and its console front end.
"""


class MinefieldError(Exception):
    """Base class for all Minefield errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board configuration cannot produce a playable game."""


class InvalidPosition(MinefieldError, ValueError):
    """A move targets a position outside the grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Position ({row}, {col}) is outside the board")
        self.row = row
        self.col = col


class ParseError(MinefieldError, ValueError):
    """Player input could not be turned into a move or mine count."""


class GameOverError(MinefieldError, RuntimeError):
    """A move was attempted after the game was lost."""
