"""
Tests for the othello opponent.

Tests:
- Corners are taken whenever available
- Passing when there is no move
- Lookahead maximizes the worst case over replies
- Positional evaluation with exact weights
"""

import random

import pytest

from ..bots import OthelloBot, OthelloEvaluator, OthelloWeights, POSITION_VALUES, evaluate
from ..engine_core.action import ActionType
from ..engine_core.action_generator import legal_actions
from ..games.othello import CORNERS, Disc, apply_move, count_discs, find_legal_moves, place_disc
from .conftest import CENTER_CROSS, make_othello


@pytest.fixture
def bot() -> OthelloBot:
    return OthelloBot(rng=random.Random(5))



class DiscCountEvaluator(OthelloEvaluator):
    """Scores a board by disc difference alone."""

    def evaluate(self, board, side):
        return count_discs(board, side) - count_discs(board, side.other)

class TestCornerPreference:
    """Tests for the corner rule."""

    def test_takes_corner_over_other_moves(self, bot):
        """White can capture into (0, 0) or play in the centre; the corner wins."""
        discs = dict(CENTER_CROSS)
        discs[(0, 1)] = Disc.BLACK
        discs[(0, 2)] = Disc.WHITE
        state = make_othello(discs, current_player=Disc.WHITE)

        moves = find_legal_moves(state.board, Disc.WHITE)
        assert (0, 0) in moves
        assert len(moves) > 1

        assert bot.select_move(state) == (0, 0)

    def test_corner_values_dominate_matrix(self):
        for row, col in CORNERS:
            assert POSITION_VALUES[row][col] == max(max(r) for r in POSITION_VALUES)
        assert POSITION_VALUES[1][1] == min(min(r) for r in POSITION_VALUES)


class TestPassing:
    """Tests for a bot without moves."""

    def test_no_move_returns_none(self, bot):
        state = make_othello(
            {(0, 0): Disc.BLACK, (0, 1): Disc.WHITE, (5, 0): Disc.BLACK},
            current_player=Disc.WHITE,
        )
        assert bot.select_move(state) is None

    def test_no_move_decision_is_pass(self, bot):
        state = make_othello(
            {(0, 0): Disc.BLACK, (0, 1): Disc.WHITE, (5, 0): Disc.BLACK},
            current_player=Disc.WHITE,
        )
        decision = bot.select_action(state, legal_actions(state))
        assert decision.action.action_type == ActionType.PASS


class TestLookahead:
    """Tests for the non-corner path."""

    def test_reply_after_opening_is_legal(self, bot, fresh_othello):
        state = apply_move(fresh_othello, 1, 2)
        move = bot.select_move(state)
        assert move in find_legal_moves(state.board, Disc.WHITE)

    def test_choice_is_repeatable(self, fresh_othello):
        state = apply_move(fresh_othello, 1, 2)
        first = OthelloBot(rng=random.Random(1)).select_move(state)
        second = OthelloBot(rng=random.Random(2)).select_move(state)
        assert first == second

    def test_decision_matches_legal_action(self, bot, fresh_othello):
        state = apply_move(fresh_othello, 1, 2)
        legal = legal_actions(state)
        decision = bot.select_action(state, legal)
        assert decision.action in legal
        assert decision.evaluated_actions == len(legal)


    def test_worst_case_beats_greedy_move(self):
        """
        (1, 1) flips two discs but opens (1, 5) for a four-disc recapture;
        (4, 3) flips one and leaves only a one-disc reply.
        """
        state = make_othello(
            {
                (1, 0): Disc.BLACK,
                (1, 2): Disc.BLACK,
                (1, 3): Disc.BLACK,
                (1, 4): Disc.WHITE,
                (4, 1): Disc.WHITE,
                (4, 2): Disc.BLACK,
            },
            current_player=Disc.WHITE,
        )
        bot = OthelloBot(evaluator=DiscCountEvaluator(), rng=random.Random(0))
        moves = find_legal_moves(state.board, Disc.WHITE)
        assert sorted(moves) == [(1, 1), (4, 3)]

        assert bot._best_by_static(state.board, moves) == ((1, 1), 3)
        assert bot._best_by_lookahead(state.board, moves) == ((4, 3), -2)
        assert bot.select_move(state) == (4, 3)

    def test_reply_free_move_earns_pass_bonus(self, bot):
        state = make_othello({(2, 2): Disc.WHITE, (2, 3): Disc.BLACK}, current_player=Disc.WHITE)
        after = place_disc(state.board, 2, 4, Disc.WHITE)
        assert find_legal_moves(after, Disc.BLACK) == []

        move, score = bot._best_by_lookahead(state.board, [(2, 4)])
        assert move == (2, 4)
        assert score == evaluate(after, Disc.WHITE) + 30 == 61

        no_bonus = OthelloBot(evaluator=OthelloEvaluator(OthelloWeights(pass_bonus=0)))
        assert no_bonus._best_by_lookahead(state.board, [(2, 4)]) == ((2, 4), 31)

class TestEvaluator:
    """Tests for static evaluation."""

    def test_corner_owner_is_ahead(self):
        board = make_othello({(0, 0): Disc.WHITE, (1, 1): Disc.BLACK}).board
        assert evaluate(board, Disc.WHITE) > 0
        assert evaluate(board, Disc.BLACK) < 0

    def test_opening_is_balanced(self, fresh_othello):
        evaluator = OthelloEvaluator()
        assert evaluator.evaluate(fresh_othello.board, Disc.BLACK) == 0
        assert evaluator.evaluate(fresh_othello.board, Disc.WHITE) == 0

    def test_endgame_counts_discs(self):
        """Past the endgame threshold the disc difference dominates mobility."""
        evaluator = OthelloEvaluator()
        discs = {(r, c): Disc.BLACK for r in range(2, 6) for c in range(6)}
        discs.update({(r, c): Disc.WHITE for r in range(0, 2) for c in range(2, 6)})
        board = make_othello(discs).board

        black = sum(1 for row in board for sq in row if sq is Disc.BLACK)
        white = sum(1 for row in board for sq in row if sq is Disc.WHITE)
        assert black + white >= evaluator.weights.endgame_discs

        positional = sum(
            POSITION_VALUES[r][c] * (1 if sq is Disc.BLACK else -1)
            for r, row in enumerate(board)
            for c, sq in enumerate(row)
            if sq is not None
        )
        expected = positional + evaluator.weights.endgame_disc_weight * (black - white)
        assert evaluator.evaluate(board, Disc.BLACK) == expected

    def test_midgame_terms_exact(self):
        """
        W(2,2) B(2,3) W(2,4): positional 15 - 15 - 5, White has no move
        and Black has two, one disc ahead for White.
        """
        board = make_othello({
            (2, 2): Disc.WHITE,
            (2, 3): Disc.BLACK,
            (2, 4): Disc.WHITE,
        }).board
        assert find_legal_moves(board, Disc.WHITE) == []
        assert sorted(find_legal_moves(board, Disc.BLACK)) == [(2, 1), (2, 5)]

        # -5 positional, 5 * (0 - 2) mobility, 2 * (2 - 1) discs
        assert evaluate(board, Disc.WHITE) == -13
        assert evaluate(board, Disc.BLACK) == 13

    def test_opening_reply_exact(self, fresh_othello):
        """After Black (1, 2): positional 25, three moves each, three discs ahead."""
        board = apply_move(fresh_othello, 1, 2).board
        assert evaluate(board, Disc.BLACK) == 31
        assert evaluate(board, Disc.WHITE) == -31
