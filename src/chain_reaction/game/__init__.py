from chain_reaction.game.side import Side
from chain_reaction.game.grid import Grid
from chain_reaction.game.board import Board, dump
from chain_reaction.game.view import BoardView

__all__ = [
    'Side',
    'Grid',
    'Board',
    'BoardView',
    'dump',
]
