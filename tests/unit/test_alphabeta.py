"""
Unit tests for the alpha-beta search engine.

Tests verify:
1. The engine picks the capturing move when one exists
2. Pruning never changes the value or the move, only the node count
3. The board is restored exactly after every search
4. Positions with one or no legal move are handled explicitly
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from chain_reaction.engine.alphabeta import AlphaBetaEngine, SearchResult, choose_move
from chain_reaction.engine.evaluation import static_eval
from chain_reaction.engine.move_generation import legal_moves
from chain_reaction.errors import NoLegalMove
from chain_reaction.game.board import Board
from chain_reaction.game.side import Side

RED, BLUE = Side.RED, Side.BLUE


def reachable_positions(size, plies):
    """Every board reachable from an empty SIZE x SIZE board in at most PLIES moves."""
    board = Board(size)
    positions = []

    def walk(depth):
        positions.append(Board.from_board(board))
        if depth == 0 or board.winner() != Side.NONE:
            return
        player = board.current_player
        for r, c in legal_moves(board, player):
            with board.trial(player, r, c):
                walk(depth - 1)

    walk(plies)
    return positions


def plain_minimax(board, player, root, depth):
    """Textbook minimax without any window, for comparison."""
    moves = legal_moves(board, player)
    if depth == 0 or not moves:
        return static_eval(board, root)
    scores = []
    for r, c in moves:
        with board.trial(player, r, c):
            scores.append(plain_minimax(board, player.opposite(), root, depth - 1))
    return max(scores) if player == root else min(scores)


class TestEvaluation:
    """Test the static evaluator."""

    def test_counts_owned_cells(self):
        board = Board(3)
        board.set(1, 1, 2, RED)
        board.set(2, 2, 1, RED)
        board.set(3, 3, 3, BLUE)
        assert static_eval(board, RED) == 2
        assert static_eval(board, BLUE) == 1


class TestAlphaBetaEngine:
    """Test alpha-beta search engine."""

    def test_finds_capture(self):
        """Depth 1 prefers the overflow at (3,3) that takes two blue cells."""
        board = Board(3)
        board.set(3, 3, 2, RED)
        board.set(3, 2, 1, BLUE)
        board.set(2, 3, 1, BLUE)

        result = AlphaBetaEngine(max_depth=1).search(board, RED)

        assert isinstance(result, SearchResult)
        assert result.best_move == (3, 3)
        assert result.score == 3

    def test_first_move_breaks_ties(self):
        board = Board(3)
        assert choose_move(board, RED, 1) == (1, 1)

    def test_leaves_scored_for_root_side(self):
        """After BLUE's best reply RED still owns its cell: score is RED's count."""
        board = Board(3)
        result = AlphaBetaEngine(max_depth=2).search(board, RED)
        assert result.score == 1

    def test_single_legal_move(self):
        board = Board(2)
        board.set(1, 1, 1, BLUE)
        board.set(1, 2, 1, BLUE)
        board.set(2, 1, 1, BLUE)
        assert legal_moves(board, RED) == [(2, 2)]
        for depth in range(1, 5):
            assert choose_move(board, RED, depth) == (2, 2)

    def test_no_legal_move(self):
        board = Board(2)
        for r in (1, 2):
            for c in (1, 2):
                board.set(r, c, 1, BLUE)
        before = Board.from_board(board)
        with pytest.raises(NoLegalMove):
            choose_move(board, RED, 3)
        assert board == before

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            AlphaBetaEngine(max_depth=0)

    def test_board_restored(self):
        board = Board(4)
        for player, r, c in [(RED, 1, 1), (BLUE, 4, 4), (RED, 1, 1), (BLUE, 2, 2)]:
            board.add_spot(player, r, c)
        before = Board.from_board(board)
        dump_before = str(board)

        move = choose_move(board, RED, 3)

        assert board == before
        assert str(board) == dump_before
        assert board.history_depth == 4
        assert board.num_of(RED) == before.num_of(RED)
        assert board.is_legal(RED, *move)

        # History is intact: undo still walks back through the real game
        board.undo()
        assert board.spots(2, 2) == 0

    def test_search_for_side_not_to_move(self):
        board = Board(3)
        board.add_spot(RED, 2, 2)
        move = choose_move(board, RED, 2)
        assert board.is_legal(RED, *move)
        assert board.current_player == BLUE
        assert board.num_moves == 1

    def test_pruning_matches_minimax_small_boards(self):
        """Alpha-beta and plain minimax agree on every position and depth."""
        cases = [(2, 4, (1, 2, 3)), (3, 3, (1, 2)), (3, 2, (3,))]
        for size, plies, depths in cases:
            for position in reachable_positions(size, plies):
                player = position.current_player
                if not legal_moves(position, player):
                    continue
                for depth in depths:
                    pruned = AlphaBetaEngine(depth, use_pruning=True).search(position, player)
                    full = AlphaBetaEngine(depth, use_pruning=False).search(position, player)
                    expected = plain_minimax(position, player, player, depth)

                    assert pruned.score == expected
                    assert full.score == expected
                    assert pruned.best_move == full.best_move
                    assert pruned.nodes_searched <= full.nodes_searched

    def test_pruning_saves_nodes(self):
        board = Board(3)
        pruned = AlphaBetaEngine(3, use_pruning=True).search(board, RED)
        full = AlphaBetaEngine(3, use_pruning=False).search(board, RED)
        assert full.nodes_searched == 1 + 9 + 9 * 8 + 9 * 8 * 8
        assert pruned.nodes_searched < full.nodes_searched
        assert pruned.score == full.score

    def test_result_fields(self):
        board = Board(3)
        result = AlphaBetaEngine(max_depth=2).search(board, BLUE)
        assert result.depth == 2
        assert result.nodes_searched > 0
        assert result.time_ms >= 0
        assert board.is_legal(BLUE, *result.best_move)
