"""
Depth-bounded minimax search with alpha-beta pruning.

The search works destructively on the one board it is given: every
candidate move is played with ``Board.add_spot`` and taken back with
``Board.undo`` before the next candidate is tried. No board is ever copied.
The board is held exclusively for the whole search and is bit-identical
afterwards, move counter and side to move included.

Algorithm overview:

    def minimax(depth, board, player, alpha, beta):
        if depth == 0 or no legal moves:
            return static_eval(board, root_color)

        for move in legal_moves(board, player):      # row-major
            with board.trial(player, move):           # add_spot ... undo
                score = minimax(depth - 1, board, player.opposite(), alpha, beta)

            if player == root_color:
                if score > alpha:
                    alpha = score
                    if depth == max_depth:
                        best_move = move
            elif score < beta:
                beta = score

            if alpha >= beta:
                break                                 # cutoff

        return alpha if player == root_color else beta

Leaves are always scored for the side that started the search, not for the
side to move at the leaf.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from chain_reaction.config import DEFAULT_DEPTH
from chain_reaction.engine.evaluation import static_eval
from chain_reaction.engine.move_generation import legal_moves
from chain_reaction.errors import NoLegalMove
from chain_reaction.game.side import Side

logger = logging.getLogger(__name__)

SCORE_INF = float('inf')


@dataclass
class SearchResult:
    """Result of alpha-beta search."""
    best_move: Optional[tuple[int, int]]
    score: float
    depth: int
    nodes_searched: int
    time_ms: int


class AlphaBetaEngine:
    """
    Fixed-depth minimax search for one side.

    Args:
        max_depth: Plies to look ahead (at least 1)
        use_pruning: Cut off branches that cannot change the result.
            Turning it off gives plain minimax: same values, more nodes.
    """

    def __init__(self, max_depth: int = DEFAULT_DEPTH, use_pruning: bool = True):
        if max_depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth
        self.use_pruning = use_pruning

        self.color = Side.NONE
        self.best_move: Optional[tuple[int, int]] = None
        self.nodes_searched = 0

    def search(self, board, player: Side) -> SearchResult:
        """
        Pick a move for PLAYER on BOARD.

        Raises NoLegalMove if PLAYER cannot move at all.
        """
        start = time.time()
        with board.exclusive():
            if not legal_moves(board, player):
                raise NoLegalMove(player)

            self.color = player
            self.best_move = None
            self.nodes_searched = 0
            score = self._minimax(self.max_depth, board, player, -SCORE_INF, SCORE_INF)

        elapsed_ms = int((time.time() - start) * 1000)
        logger.debug(
            "%s depth %d: move %s score %s (%d nodes, %d ms)",
            player, self.max_depth, self.best_move, score, self.nodes_searched, elapsed_ms,
        )
        return SearchResult(
            best_move=self.best_move,
            score=score,
            depth=self.max_depth,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
        )

    def _minimax(self, depth: int, board, player: Side, alpha: float, beta: float) -> float:
        """
        Value of BOARD with PLAYER to move, searched DEPTH more plies.

        Returns alpha for the searching side's nodes and beta for the
        opponent's; with pruning these are bounds, not exact values, for
        every node but the root.
        """
        self.nodes_searched += 1
        if depth == 0:
            return static_eval(board, self.color)

        moves = legal_moves(board, player)
        if not moves:
            return static_eval(board, self.color)

        maximizing = player == self.color
        for row, col in moves:
            if self.use_pruning:
                child_alpha, child_beta = alpha, beta
            else:
                child_alpha, child_beta = -SCORE_INF, SCORE_INF

            with board.trial(player, row, col):
                score = self._minimax(depth - 1, board, player.opposite(), child_alpha, child_beta)

            if maximizing:
                if score > alpha:
                    alpha = score
                    if depth == self.max_depth:
                        self.best_move = (row, col)
            elif score < beta:
                beta = score

            if self.use_pruning and alpha >= beta:
                break

        return alpha if maximizing else beta


def choose_move(board, player: Side, depth: int = DEFAULT_DEPTH) -> tuple[int, int]:
    """Best move for PLAYER on BOARD looking DEPTH plies ahead."""
    return AlphaBetaEngine(max_depth=depth).search(board, player).best_move
