"""
Mutable chain reaction board.

The board owns a Grid, the side to move, the move counter and an undo
history of full grid snapshots. Placing a spot on a cell whose count then
exceeds its capacity triggers a cascade:

    cascade(r, c):
        if one side owns the whole board: stop
        spots(r, c) = 1
        for (nr, nc) in up, down, left, right of (r, c):
            spots(nr, nc) += 1
            owner(nr, nc) = owner(r, c)
            if spots(nr, nc) > capacity(nr, nc):
                cascade(nr, nc)          # depth first, before the next neighbour

The neighbour order and depth-first propagation are observable in the final
position whenever overflows chain, so both are reproduced exactly. The
recursion is unrolled onto an explicit stack so long chains on big boards
cannot hit the interpreter recursion limit.

Coordinates are 1-indexed (row, col). Square numbers are 0-indexed and
row-major: n = (row - 1) * size + (col - 1).
"""

import logging
import threading
from contextlib import contextmanager
from functools import wraps
from typing import Iterator

import numpy as np

from chain_reaction.config import DEFAULT_BOARD_SIZE, validate_size
from chain_reaction.errors import EmptyHistory, IllegalMove
from chain_reaction.game.grid import Grid
from chain_reaction.game.side import Side

logger = logging.getLogger(__name__)


def _mutator(method):
    """Run METHOD while holding the board's lock."""
    @wraps(method)
    def locked(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return locked


class Board:
    """
    An N x N chain reaction board.

    RED moves first. ``add_spot`` and ``undo`` are the live-play mutations;
    ``set``, ``clear``, ``copy``, ``set_moves`` and ``set_current_player``
    are administrative edits that bypass the rules and discard the undo
    history.

    Every mutating method holds a re-entrant lock. A search takes the same
    lock for its whole duration through ``exclusive()``, so no other thread
    can change the board under it.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        validate_size(size)
        self._lock = threading.RLock()
        self._grid = Grid(size)
        self._history: list[Grid] = []
        self._num_moves = 0
        self._current_player = Side.RED
        self._counts = {Side.RED: 0, Side.BLUE: 0}

    @classmethod
    def from_board(cls, other) -> "Board":
        """A new board with the contents of OTHER and an empty undo history."""
        board = cls(other.size)
        board.copy(other)
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def current_player(self) -> Side:
        return self._current_player

    @property
    def num_moves(self) -> int:
        return self._num_moves

    @property
    def history_depth(self) -> int:
        """Number of moves that can currently be undone."""
        return len(self._history)

    def exists(self, row: int, col: int) -> bool:
        return self._grid.in_bounds(row, col)

    def capacity(self, row: int, col: int) -> int:
        self._check_on_board(row, col)
        return self._grid.capacity(row, col)

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        self._check_on_board(row, col)
        return self._grid.neighbors(row, col)

    def owner(self, row: int, col: int) -> Side:
        self._check_on_board(row, col)
        return self._grid.owner(row, col)

    color = owner

    def spots(self, row: int, col: int) -> int:
        self._check_on_board(row, col)
        return self._grid.spot_count(row, col)

    def num_of(self, side: Side) -> int:
        """Number of cells owned by SIDE; for NONE, the number of empty cells."""
        if side == Side.NONE:
            return self.size * self.size - self._counts[Side.RED] - self._counts[Side.BLUE]
        return self._counts[side]

    def is_legal(self, player: Side, row: int, col: int) -> bool:
        """True if PLAYER may add a spot at (row, col)."""
        if not self._grid.in_bounds(row, col):
            return False
        return player.playable_square(self._grid.owner(row, col))

    def winner(self) -> Side:
        """
        The side owning every non-empty cell, or NONE while the game is open.

        The first move always leaves its player owning every non-empty cell,
        so nobody can win before the second move.
        """
        if self._num_moves <= 1:
            return Side.NONE
        red, blue = self._counts[Side.RED], self._counts[Side.BLUE]
        if red > 0 and blue == 0:
            return Side.RED
        if blue > 0 and red == 0:
            return Side.BLUE
        return Side.NONE

    def is_saturated(self) -> bool:
        """True when one side owns every cell; cascades are then suppressed."""
        total = self.size * self.size
        return self._counts[Side.RED] == total or self._counts[Side.BLUE] == total

    # Square-number forms

    def row(self, n: int) -> int:
        return n // self.size + 1

    def col(self, n: int) -> int:
        return n % self.size + 1

    def sq_num(self, row: int, col: int) -> int:
        return (row - 1) * self.size + (col - 1)

    def owner_sq(self, n: int) -> Side:
        return self.owner(self.row(n), self.col(n))

    def spots_sq(self, n: int) -> int:
        return self.spots(self.row(n), self.col(n))

    # ------------------------------------------------------------------
    # Live play
    # ------------------------------------------------------------------

    @_mutator
    def add_spot(self, player: Side, row: int, col: int) -> None:
        """
        Add one spot of PLAYER at (row, col), cascading if it overflows.

        Pushes exactly one undo snapshot, increments the move counter and
        passes the turn. Raises IllegalMove if the cell is off the board or
        held by the opponent.
        """
        if not self._grid.in_bounds(row, col):
            raise IllegalMove(row, col, player, IllegalMove.OFF_BOARD)
        if player == Side.NONE or not player.playable_square(self._grid.owner(row, col)):
            raise IllegalMove(row, col, player, IllegalMove.OCCUPIED)

        self._history.append(self._grid.copy())
        self._set_owner(row, col, player)
        self._grid.spots[row - 1, col - 1] += 1
        if self._grid.spots[row - 1, col - 1] > self._grid.capacity(row, col):
            self._cascade(row, col)
        self._num_moves += 1
        self._current_player = self._current_player.opposite()

    def add_spot_sq(self, player: Side, n: int) -> None:
        self.add_spot(player, self.row(n), self.col(n))

    @_mutator
    def undo(self) -> None:
        """Take back the most recent add_spot."""
        if not self._history:
            raise EmptyHistory()
        self._grid = self._history.pop()
        self._num_moves -= 1
        self._current_player = self._current_player.opposite()
        self._recount()

    @contextmanager
    def trial(self, player: Side, row: int, col: int) -> Iterator["Board"]:
        """
        Play (row, col) for PLAYER for the duration of the block.

        The move is always taken back on exit, whether the block finishes,
        returns early or raises.
        """
        with self._lock:
            self.add_spot(player, row, col)
            try:
                yield self
            finally:
                self.undo()

    @contextmanager
    def exclusive(self) -> Iterator["Board"]:
        """Hold the board lock so no other thread can mutate it."""
        with self._lock:
            yield self

    # ------------------------------------------------------------------
    # Administrative edits
    # ------------------------------------------------------------------

    @_mutator
    def set(self, row: int, col: int, num: int, player: Side) -> None:
        """
        Put NUM spots of PLAYER on (row, col) without any rule checks.

        NUM == 0 empties the cell whatever PLAYER is. Clears the undo history.
        """
        if not self._grid.in_bounds(row, col):
            raise IllegalMove(row, col, player, IllegalMove.OFF_BOARD)
        if num < 0:
            raise ValueError(f"Spot count must be non-negative, got {num}")
        if num == 0:
            player = Side.NONE
        elif player == Side.NONE:
            raise ValueError("A non-empty cell needs an owner")
        self._set_owner(row, col, player)
        self._grid.spots[row - 1, col - 1] = num
        self._history.clear()

    def set_sq(self, n: int, num: int, player: Side) -> None:
        self.set(self.row(n), self.col(n), num, player)

    @_mutator
    def clear(self, size: int) -> None:
        """Reset to an empty SIZE x SIZE board with RED to move."""
        validate_size(size)
        self._grid = Grid(size)
        self._history.clear()
        self._num_moves = 0
        self._current_player = Side.RED
        self._counts = {Side.RED: 0, Side.BLUE: 0}

    @_mutator
    def copy(self, other) -> None:
        """
        Make this board a copy of OTHER (a Board or BoardView).

        The cell contents, move counter and side to move are copied; the
        undo history is not.
        """
        size = other.size
        grid = Grid(size)
        for r in range(1, size + 1):
            for c in range(1, size + 1):
                grid.owners[r - 1, c - 1] = other.owner(r, c).value
                grid.spots[r - 1, c - 1] = other.spots(r, c)
        self._grid = grid
        self._history.clear()
        self._num_moves = other.num_moves
        self._current_player = other.current_player
        self._recount()

    @_mutator
    def set_moves(self, num: int) -> None:
        """Set the move counter. Clears the undo history."""
        if num < 0:
            raise ValueError(f"Move count must be non-negative, got {num}")
        self._num_moves = num
        self._history.clear()

    @_mutator
    def set_current_player(self, player: Side) -> None:
        """Set the side to move. Clears the undo history."""
        if player == Side.NONE:
            raise ValueError("The side to move must be RED or BLUE")
        self._current_player = player
        self._history.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_on_board(self, row: int, col: int) -> None:
        if not self._grid.in_bounds(row, col):
            raise IllegalMove(row, col, reason=IllegalMove.OFF_BOARD)

    def _set_owner(self, row: int, col: int, side: Side) -> None:
        """Change a cell's owner, keeping the per-side counts in step."""
        old = Side(int(self._grid.owners[row - 1, col - 1]))
        if old == side:
            return
        if old != Side.NONE:
            self._counts[old] -= 1
        if side != Side.NONE:
            self._counts[side] += 1
        self._grid.owners[row - 1, col - 1] = side.value

    def _recount(self) -> None:
        self._counts = {
            Side.RED: self._grid.count(Side.RED),
            Side.BLUE: self._grid.count(Side.BLUE),
        }

    def _cascade(self, row: int, col: int) -> None:
        """Distribute the overflowing cell at (row, col) to its neighbours."""
        if self.is_saturated():
            return
        grid = self._grid
        color = grid.owner(row, col)
        jumps = 1
        grid.spots[row - 1, col - 1] = 1
        # Each frame is the remaining neighbours of one overflowing cell.
        stack = [iter(grid.neighbors(row, col))]
        while stack:
            cell = next(stack[-1], None)
            if cell is None:
                stack.pop()
                continue
            r, c = cell
            self._set_owner(r, c, color)
            grid.spots[r - 1, c - 1] += 1
            if grid.spots[r - 1, c - 1] > grid.capacity(r, c) and not self.is_saturated():
                grid.spots[r - 1, c - 1] = 1
                stack.append(iter(grid.neighbors(r, c)))
                jumps += 1
        logger.debug("Cascade from (%d, %d) for %s: %d jump(s)", row, col, color, jumps)

    # ------------------------------------------------------------------
    # Comparison and display
    # ------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Signed spot counts (RED positive, BLUE negative), 0-indexed."""
        return self._grid.to_array()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._grid == other._grid
            and self._num_moves == other._num_moves
            and self._current_player == other._current_player
        )

    __hash__ = None

    def __str__(self) -> str:
        return dump(self)

    def __repr__(self) -> str:
        return (f"Board({self.size}x{self.size}, moves={self._num_moves}, "
                f"to_move={self._current_player})")


def dump(board) -> str:
    """
    Standard board dump, e.g. for a 2x2 board::

        ===
            1r --
            -- 2b
        ===
    """
    lines = ["==="]
    for r in range(1, board.size + 1):
        cells = []
        for c in range(1, board.size + 1):
            spots = board.spots(r, c)
            cells.append("--" if spots == 0 else f"{spots}{board.owner(r, c).symbol}")
        lines.append("    " + " ".join(cells))
    lines.append("===")
    return "\n".join(lines)
