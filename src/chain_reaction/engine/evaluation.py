from chain_reaction.game.side import Side


def static_eval(board, side: Side) -> int:
    """Heuristic value of BOARD for SIDE: the number of cells it owns."""
    return board.num_of(side)
