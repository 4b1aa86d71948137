"""
Tests for three-mark tic-tac-toe rules.

Tests:
- Opening position
- Placement legality
- Oldest-mark eviction at the cap
- Relocation moves
- Win detection and the half-move draw
"""

import random

import pytest

from ..games.tictactoe import (
    MAX_MARKS,
    OPENING_CELLS,
    Move,
    Outcome,
    Side,
    TicTacToeState,
    apply_move,
    apply_placement,
    check_winner,
    generate_moves,
    is_legal_placement,
    is_legal_relocation,
    winning_moves,
)
from .conftest import make_tictactoe


class TestNewGame:
    """Tests for the opening position."""

    def test_opponent_opens_on_center_or_corner(self):
        """The opening mark is always on the center or a corner."""
        for seed in range(20):
            state = TicTacToeState.new_game(rng=random.Random(seed))
            assert state.opponent_marks[0] in OPENING_CELLS
            assert state.board.count(Side.OPPONENT) == 1
            assert state.board.count(Side.PLAYER) == 0

    def test_player_moves_first_after_opening(self, fresh_tictactoe):
        assert fresh_tictactoe.turn is Side.PLAYER
        assert fresh_tictactoe.half_moves == 0
        assert not fresh_tictactoe.game_over


class TestPlacement:
    """Tests for ordinary placements."""

    def test_placement_on_empty_cell(self):
        state = make_tictactoe(opponent=(4,))
        new_state = apply_placement(state, 0, Side.PLAYER)

        assert new_state.board[0] is Side.PLAYER
        assert new_state.player_marks == (0,)
        assert new_state.turn is Side.OPPONENT
        assert new_state.half_moves == 1

    def test_occupied_cell_is_noop(self):
        """Placing on an occupied cell returns the same state."""
        state = make_tictactoe(opponent=(4,))
        assert not is_legal_placement(state, 4, Side.PLAYER)
        assert apply_placement(state, 4, Side.PLAYER) is state

    def test_out_of_range_cell_is_noop(self):
        state = make_tictactoe(opponent=(4,))
        assert not is_legal_placement(state, 9, Side.PLAYER)
        assert not is_legal_placement(state, -1, Side.PLAYER)
        assert apply_placement(state, 9, Side.PLAYER) is state

    def test_wrong_side_is_noop(self):
        state = make_tictactoe(opponent=(4,))
        assert apply_placement(state, 0, Side.OPPONENT) is state

    def test_input_state_not_mutated(self):
        state = make_tictactoe(opponent=(4,))
        board_before = state.board
        apply_placement(state, 0, Side.PLAYER)
        assert state.board == board_before
        assert state.player_marks == ()


class TestEviction:
    """Tests for the three-mark cap."""

    def test_fourth_mark_lifts_oldest(self):
        """At the cap the oldest mark is removed before placing."""
        state = make_tictactoe(player=(0, 5, 7), opponent=(4, 2, 3))
        new_state = apply_placement(state, 1, Side.PLAYER)

        assert new_state.board[0] is None
        assert new_state.board[1] is Side.PLAYER
        assert new_state.player_marks == (5, 7, 1)
        assert new_state.player_mark_count == MAX_MARKS

    def test_mark_count_never_exceeds_cap(self, rng):
        """Random play never leaves a side with more than three marks."""
        state = TicTacToeState.new_game(rng=rng)
        for _ in range(40):
            if state.game_over:
                break
            moves = generate_moves(state, state.turn)
            state = apply_move(state, rng.choice(moves), state.turn)
            assert state.player_mark_count <= MAX_MARKS
            assert state.opponent_mark_count <= MAX_MARKS
            assert state.board.count(Side.PLAYER) == state.player_mark_count
            assert state.board.count(Side.OPPONENT) == state.opponent_mark_count

    def test_eviction_follows_placement_order(self):
        """Eviction uses placement order, not board position."""
        state = make_tictactoe(player=(8, 0, 5), opponent=(4, 2, 3))
        new_state = apply_placement(state, 1, Side.PLAYER)
        assert new_state.board[8] is None
        assert new_state.board[0] is Side.PLAYER


class TestRelocation:
    """Tests for moving a chosen mark."""

    def test_relocation_lifts_chosen_mark(self):
        state = make_tictactoe(player=(0, 5, 7), opponent=(4, 2, 3))
        assert is_legal_relocation(state, 5, 1, Side.PLAYER)

        new_state = apply_placement(state, 1, Side.PLAYER, source=5)
        assert new_state.board[5] is None
        assert new_state.board[0] is Side.PLAYER
        assert new_state.player_marks == (0, 7, 1)

    def test_relocation_below_cap_is_illegal(self):
        state = make_tictactoe(player=(0, 5), opponent=(4, 2))
        assert not is_legal_relocation(state, 5, 1, Side.PLAYER)
        assert apply_placement(state, 1, Side.PLAYER, source=5) is state

    def test_relocation_from_foreign_cell_is_illegal(self):
        state = make_tictactoe(player=(0, 5, 7), opponent=(4, 2, 3))
        assert not is_legal_relocation(state, 4, 1, Side.PLAYER)

    def test_generated_relocations_skip_oldest(self):
        """Lifting the oldest mark is already a plain placement."""
        state = make_tictactoe(player=(0, 5, 7), opponent=(4, 2, 3))
        moves = generate_moves(state, Side.PLAYER)
        sources = {m.source for m in moves if m.is_relocation}
        assert sources == {5, 7}
        # 3 empty cells, each as a placement and two relocations
        assert len(moves) == 9


class TestTermination:
    """Tests for wins and the draw cap."""

    @pytest.mark.parametrize("line", [(0, 1, 2), (2, 5, 8), (2, 4, 6)])
    def test_check_winner_on_lines(self, line):
        board = [None] * 9
        for cell in line:
            board[cell] = Side.OPPONENT
        assert check_winner(board) is Side.OPPONENT

    def test_completing_line_wins(self):
        state = make_tictactoe(player=(0, 1), opponent=(4, 8), turn=Side.PLAYER)
        new_state = apply_placement(state, 2, Side.PLAYER)
        assert new_state.winner is Outcome.PLAYER
        assert new_state.game_over

    def test_win_after_eviction(self):
        """A line formed after lifting the oldest mark counts."""
        state = make_tictactoe(player=(8, 0, 1), opponent=(4, 3, 7))
        new_state = apply_placement(state, 2, Side.PLAYER)
        assert new_state.winner is Outcome.PLAYER

    def test_no_moves_after_game_over(self):
        state = make_tictactoe(player=(0, 1), opponent=(4, 8))
        won = apply_placement(state, 2, Side.PLAYER)
        assert generate_moves(won, won.turn) == []
        assert apply_placement(won, 5, Side.OPPONENT) is won

    def test_half_move_cap_draws(self):
        state = make_tictactoe(player=(0,), opponent=(4,), half_moves=9, max_half_moves=10)
        new_state = apply_placement(state, 8, Side.PLAYER)
        assert new_state.winner is Outcome.DRAW

    def test_winning_moves_probe_other_side(self):
        """winning_moves looks ahead for a side that is not to move."""
        state = make_tictactoe(player=(0, 1), opponent=(4,), turn=Side.OPPONENT)
        assert winning_moves(state, Side.PLAYER) == [Move(2)]
        assert winning_moves(state, Side.OPPONENT) == []
