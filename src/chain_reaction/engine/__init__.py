"""
Move search for the automated player.

- Move enumeration in row-major order
- Static evaluation by cell count
- Fixed-depth minimax with alpha-beta pruning over a single shared board
"""

from chain_reaction.engine.move_generation import legal_moves
from chain_reaction.engine.evaluation import static_eval
from chain_reaction.engine.alphabeta import AlphaBetaEngine, SearchResult, choose_move

__all__ = [
    'legal_moves',
    'static_eval',
    'AlphaBetaEngine',
    'SearchResult',
    'choose_move',
]
