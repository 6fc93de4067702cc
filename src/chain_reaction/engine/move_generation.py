from chain_reaction.game.side import Side


def legal_moves(board, player: Side) -> list[tuple[int, int]]:
    """
    All cells PLAYER may add a spot to, in row-major order.

    The search relies on this order: ties between equally scored moves go
    to the one found first.
    """
    size = board.size
    return [
        (r, c)
        for r in range(1, size + 1)
        for c in range(1, size + 1)
        if board.is_legal(player, r, c)
    ]
