"""
Chain reaction: a turn-based capture game on a square grid, with an
alpha-beta player.
"""

from chain_reaction.errors import EmptyHistory, GameError, IllegalMove, InvalidSize, NoLegalMove
from chain_reaction.game import Board, BoardView, Side
from chain_reaction.engine import AlphaBetaEngine, choose_move, legal_moves, static_eval
from chain_reaction.players import Automated, Human, decide_move
from chain_reaction.match import Match

__version__ = "0.1"

__all__ = [
    'Board',
    'BoardView',
    'Side',
    'AlphaBetaEngine',
    'choose_move',
    'legal_moves',
    'static_eval',
    'Human',
    'Automated',
    'decide_move',
    'Match',
    'GameError',
    'IllegalMove',
    'EmptyHistory',
    'InvalidSize',
    'NoLegalMove',
]
