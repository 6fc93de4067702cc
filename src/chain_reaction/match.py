"""
Non-interactive match driver.

Alternates two players on one board until somebody owns every occupied
cell. Reading commands, prompting and printing belong to the caller; this
module only asks players for moves, applies them and detects the winner.
"""

import logging
from typing import Callable, Optional

from chain_reaction.engine.move_generation import legal_moves
from chain_reaction.game.board import Board
from chain_reaction.game.side import Side
from chain_reaction.game.view import BoardView
from chain_reaction.players import AskHuman, Player, decide_move

logger = logging.getLogger(__name__)


class Match:
    """
    One game between RED and BLUE on BOARD.

    The board's current player decides whose turn it is. Human players get
    their moves from ``ask_human``; ``on_move(side, move)`` is called after
    every applied move.
    """

    def __init__(
        self,
        board: Board,
        red: Player,
        blue: Player,
        ask_human: Optional[AskHuman] = None,
        on_move: Optional[Callable[[Side, tuple[int, int]], None]] = None,
    ):
        self.board = board
        self.players = {Side.RED: red, Side.BLUE: blue}
        self.ask_human = ask_human
        self.on_move = on_move

    @property
    def view(self) -> BoardView:
        return BoardView(self.board)

    def winner(self) -> Side:
        """The winning side, or NONE while play continues."""
        winner = self.board.winner()
        if winner != Side.NONE:
            return winner
        side = self.board.current_player
        if self.board.num_moves > 0 and not legal_moves(self.board, side):
            return side.opposite()
        return Side.NONE

    def step(self) -> Side:
        """
        Play one move for the side to move and return the winner (or NONE).

        Errors from the players, such as an IllegalMove typed by a human,
        propagate with the board unchanged.
        """
        side = self.board.current_player
        move = decide_move(self.players[side], self.board, side, self.ask_human)
        self.board.add_spot(side, *move)
        logger.info("%s moves %d %d", side, *move)
        if self.on_move is not None:
            self.on_move(side, move)
        return self.winner()

    def play(self, max_moves: Optional[int] = None) -> Side:
        """
        Play until someone wins and return the winner.

        Returns NONE if MAX_MOVES moves are played first.
        """
        played = 0
        winner = self.winner()
        while winner == Side.NONE:
            if max_moves is not None and played >= max_moves:
                logger.info("Stopped after %d moves without a winner", played)
                return Side.NONE
            winner = self.step()
            played += 1
        logger.info("%s wins after %d moves", winner, self.board.num_moves)
        return winner
