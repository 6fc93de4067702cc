"""
Numpy-backed cell storage for a square board.

Two parallel (N, N) arrays hold the owner of each cell (Side values 0, 1, -1)
and its spot count. Coordinates passed to the public helpers are 1-indexed,
as everywhere else in the package; the arrays themselves are 0-indexed.
"""

import numpy as np

from chain_reaction.game.side import Side

# Neighbour offsets in the order cascades visit them: up, down, left, right.
NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """
    Fixed-size grid of (owner, spots) cells.

    A Grid is pure data: it knows its geometry but enforces no game rules.
    Copies are cheap (two small array copies) and are what the undo
    history stores.
    """

    __slots__ = ('size', 'owners', 'spots')

    def __init__(self, size: int, owners: np.ndarray = None, spots: np.ndarray = None):
        self.size = size
        self.owners = owners if owners is not None else np.zeros((size, size), dtype=np.int8)
        self.spots = spots if spots is not None else np.zeros((size, size), dtype=np.int64)

    def copy(self) -> "Grid":
        return Grid(self.size, self.owners.copy(), self.spots.copy())

    def in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self.size and 1 <= col <= self.size

    def capacity(self, row: int, col: int) -> int:
        """
        Number of board-adjacent cells: 2 in a corner, 3 on an edge, 4 inside.

        On a 1x1 board the single cell has no neighbours at all.
        """
        n = self.size
        return 4 - (row == 1) - (row == n) - (col == 1) - (col == n)

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        """On-board neighbours of (row, col) in up, down, left, right order."""
        result = []
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 1 <= r <= self.size and 1 <= c <= self.size:
                result.append((r, c))
        return result

    def owner(self, row: int, col: int) -> Side:
        return Side(int(self.owners[row - 1, col - 1]))

    def spot_count(self, row: int, col: int) -> int:
        return int(self.spots[row - 1, col - 1])

    def count(self, side: Side) -> int:
        """Number of cells owned by SIDE (full scan)."""
        return int(np.count_nonzero(self.owners == side.value))

    def to_array(self) -> np.ndarray:
        """Signed spot counts: positive for RED cells, negative for BLUE."""
        return self.spots.astype(np.int64) * self.owners

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.size == other.size
            and np.array_equal(self.owners, other.owners)
            and np.array_equal(self.spots, other.spots)
        )

    def __repr__(self) -> str:
        return f"Grid({self.size}x{self.size})"
