"""
Error hierarchy for the chain reaction engine.

All errors are local and recoverable: they are raised at the point of the
violation and reported to the caller, never handled inside the engine.

Usage:
    from chain_reaction.errors import IllegalMove

    try:
        board.add_spot(Side.RED, r, c)
    except IllegalMove as e:
        print(e.message)
"""

from typing import Optional

__all__ = [
    'GameError',
    'IllegalMove',
    'EmptyHistory',
    'InvalidSize',
    'NoLegalMove',
]


class GameError(Exception):
    """Base exception for all engine errors.

    Attributes:
        code: Machine-readable error code
        message: Human-readable description
    """
    code: str = "GAME_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class IllegalMove(GameError):
    """Placement off the board or on a cell held by the opponent."""
    code = "ILLEGAL_MOVE"

    OFF_BOARD = "off_board"
    OCCUPIED = "occupied"

    def __init__(self, row: int, col: int, player=None, reason: str = OCCUPIED):
        self.row = row
        self.col = col
        self.player = player
        self.reason = reason
        if reason == self.OFF_BOARD:
            message = f"Square {row} {col} is not on the board"
        else:
            message = f"Square {row} {col} is not a valid move for {player}"
        super().__init__(message)


class EmptyHistory(GameError):
    """Undo requested with no recorded move."""
    code = "EMPTY_HISTORY"

    def __init__(self, message: str = "No move to undo"):
        super().__init__(message)


class InvalidSize(GameError):
    """Non-positive board dimension."""
    code = "INVALID_SIZE"

    def __init__(self, size):
        self.size = size
        super().__init__(f"Board size must be a positive integer, got {size!r}")


class NoLegalMove(GameError):
    """The automated player was asked for a move but none exists."""
    code = "NO_LEGAL_MOVE"

    def __init__(self, player):
        self.player = player
        super().__init__(f"No legal move for {player}")
