from chain_reaction.game.board import Board, dump
from chain_reaction.game.side import Side


class BoardView:
    """
    Read-only window onto a Board.

    Hands observers (human players, displays, the match driver's callers)
    the query surface without any way to mutate the underlying board.
    Always reflects the board's current contents.
    """

    __slots__ = ('_board',)

    def __init__(self, board: Board):
        self._board = board

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def current_player(self) -> Side:
        return self._board.current_player

    @property
    def num_moves(self) -> int:
        return self._board.num_moves

    def exists(self, row: int, col: int) -> bool:
        return self._board.exists(row, col)

    def capacity(self, row: int, col: int) -> int:
        return self._board.capacity(row, col)

    def owner(self, row: int, col: int) -> Side:
        return self._board.owner(row, col)

    color = owner

    def spots(self, row: int, col: int) -> int:
        return self._board.spots(row, col)

    def num_of(self, side: Side) -> int:
        return self._board.num_of(side)

    def is_legal(self, player: Side, row: int, col: int) -> bool:
        return self._board.is_legal(player, row, col)

    def winner(self) -> Side:
        return self._board.winner()

    def __str__(self) -> str:
        return dump(self)

    def __repr__(self) -> str:
        return f"BoardView({self._board!r})"
