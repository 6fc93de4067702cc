"""
Players as data.

A player is either ``Human()`` (moves come from an externally supplied
callback) or ``Automated(depth)`` (moves come from the search engine).
``decide_move`` is the one place that dispatches on the kind.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from chain_reaction.config import DEFAULT_DEPTH
from chain_reaction.engine.alphabeta import choose_move
from chain_reaction.game.board import Board
from chain_reaction.game.side import Side
from chain_reaction.game.view import BoardView

# (view, side) -> (row, col); the caller may block for input.
AskHuman = Callable[[BoardView, Side], tuple[int, int]]


@dataclass(frozen=True)
class Human:
    pass


@dataclass(frozen=True)
class Automated:
    depth: int = DEFAULT_DEPTH

    def __post_init__(self):
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")


Player = Union[Human, Automated]


def make_player(kind: str, depth: int = DEFAULT_DEPTH) -> Player:
    """Player from a config string: 'human' or 'auto'."""
    if kind == 'human':
        return Human()
    if kind == 'auto':
        return Automated(depth)
    raise ValueError(f"Player kind must be 'human' or 'auto', got {kind!r}")


def decide_move(
    player: Player,
    board: Board,
    side: Side,
    ask_human: Optional[AskHuman] = None,
) -> tuple[int, int]:
    """
    Next move for SIDE on BOARD according to PLAYER.

    Humans only ever see a read-only view. The returned move is not applied
    and, for humans, not validated.
    """
    if isinstance(player, Automated):
        return choose_move(board, side, player.depth)
    if isinstance(player, Human):
        if ask_human is None:
            raise ValueError("A human player needs an ask_human callback")
        return ask_human(BoardView(board), side)
    raise TypeError(f"Unknown player: {player!r}")
