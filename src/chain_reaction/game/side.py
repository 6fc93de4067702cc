from enum import IntEnum


class Side(IntEnum):
    """
    Owner of a cell, and the two players.

    Values match the +1/-1 player encoding used by the numpy owner grid:
    an unclaimed cell stores 0.
    """
    NONE = 0
    RED = 1
    BLUE = -1

    def opposite(self) -> "Side":
        """Return the other player. Undefined for NONE."""
        if self is Side.NONE:
            raise ValueError("NONE has no opposite side")
        return Side(-self.value)

    def playable_square(self, owner: "Side") -> bool:
        """True if this player may add a spot to a cell held by OWNER."""
        return owner == Side.NONE or owner == self

    @property
    def symbol(self) -> str:
        """One-letter code used in board dumps."""
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, text: str) -> "Side":
        """Parse 'red', 'blue', 'r', 'b' (any case) or 'none'/'white'."""
        key = text.strip().lower()
        if key in ('r', 'red'):
            return cls.RED
        if key in ('b', 'blue'):
            return cls.BLUE
        if key in ('-', 'none', 'white', 'w'):
            return cls.NONE
        raise ValueError(f"Unknown side: {text!r}")

    def __str__(self) -> str:
        return self.name.capitalize()


_SYMBOLS = {Side.NONE: '-', Side.RED: 'r', Side.BLUE: 'b'}
