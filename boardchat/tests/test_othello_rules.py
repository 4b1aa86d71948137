"""
Tests for 6x6 othello rules.

Tests:
- Initial layout
- Legal move generation
- Flipping in several directions
- Forced passes and game end
"""

from ..games.othello import (
    Disc,
    OthelloState,
    apply_move,
    compute_flips,
    count_discs,
    find_legal_moves,
    is_legal_move,
    pass_turn,
)
from .conftest import make_othello


class TestInitialPosition:
    """Tests for the opening board."""

    def test_center_cross(self, fresh_othello):
        assert fresh_othello.at(2, 2) is Disc.WHITE
        assert fresh_othello.at(2, 3) is Disc.BLACK
        assert fresh_othello.at(3, 2) is Disc.BLACK
        assert fresh_othello.at(3, 3) is Disc.WHITE
        assert fresh_othello.black_count == 2
        assert fresh_othello.white_count == 2

    def test_black_moves_first(self, fresh_othello):
        assert fresh_othello.current_player is Disc.BLACK
        assert not fresh_othello.game_over
        assert not fresh_othello.skip_turn

    def test_opening_moves(self, fresh_othello):
        moves = find_legal_moves(fresh_othello.board, Disc.BLACK)
        assert moves == [(1, 2), (2, 1), (3, 4), (4, 3)]

    def test_legal_moves_are_stable(self, fresh_othello):
        """Asking twice on the same board gives the same moves."""
        first = find_legal_moves(fresh_othello.board, Disc.WHITE)
        second = find_legal_moves(fresh_othello.board, Disc.WHITE)
        assert set(first) == set(second)


class TestMoves:
    """Tests for playing discs."""

    def test_opening_capture(self, fresh_othello):
        """Black on (1, 2) flips the White disc on (2, 2)."""
        state = apply_move(fresh_othello, 1, 2)

        assert state.at(1, 2) is Disc.BLACK
        assert state.at(2, 2) is Disc.BLACK
        assert state.black_count == 4
        assert state.white_count == 1
        assert state.current_player is Disc.WHITE
        assert state.last_move == (1, 2)

    def test_non_capturing_square_is_noop(self, fresh_othello):
        """(1, 3) only touches Black's own disc, so it is not a move."""
        assert not is_legal_move(fresh_othello.board, 1, 3, Disc.BLACK)
        assert apply_move(fresh_othello, 1, 3) is fresh_othello

    def test_occupied_and_off_board_squares_are_illegal(self, fresh_othello):
        assert not is_legal_move(fresh_othello.board, 2, 2, Disc.BLACK)
        assert not is_legal_move(fresh_othello.board, -1, 0, Disc.BLACK)
        assert not is_legal_move(fresh_othello.board, 0, 6, Disc.BLACK)

    def test_flips_in_several_directions(self):
        state = make_othello({
            (0, 2): Disc.BLACK,
            (1, 2): Disc.WHITE,
            (2, 0): Disc.BLACK,
            (2, 1): Disc.WHITE,
        })
        flips = compute_flips(state.board, 2, 2, Disc.BLACK)
        assert set(flips) == {(1, 2), (2, 1)}

        after = apply_move(state, 2, 2)
        assert count_discs(after.board, Disc.WHITE) == 0

    def test_input_state_not_mutated(self, fresh_othello):
        board_before = fresh_othello.board
        apply_move(fresh_othello, 1, 2)
        assert fresh_othello.board == board_before


class TestTurnPassing:
    """Tests for passes and the end of the game."""

    def test_turn_stays_when_other_side_cannot_move(self):
        """White has no reply after Black's move, so Black moves again."""
        state = make_othello({
            (0, 0): Disc.BLACK,
            (0, 1): Disc.WHITE,
            (5, 0): Disc.BLACK,
            (5, 1): Disc.WHITE,
            (5, 2): Disc.WHITE,
        })
        state = apply_move(state, 0, 2)

        assert state.skip_turn
        assert not state.game_over
        assert state.current_player is Disc.BLACK
        assert find_legal_moves(state.board, Disc.WHITE) == []
        assert (5, 3) in find_legal_moves(state.board, Disc.BLACK)

    def test_game_ends_when_nobody_can_move(self):
        state = make_othello({(0, 0): Disc.BLACK, (0, 1): Disc.WHITE})
        state = apply_move(state, 0, 2)

        assert state.game_over
        assert state.winner is Disc.BLACK

    def test_moves_after_game_over_are_noops(self):
        state = make_othello({(0, 0): Disc.BLACK, (0, 1): Disc.WHITE})
        over = apply_move(state, 0, 2)
        assert apply_move(over, 0, 3) is over
        assert pass_turn(over) is over

    def test_pass_turn_hands_over_when_stuck(self):
        state = make_othello(
            {
                (0, 0): Disc.BLACK,
                (0, 1): Disc.WHITE,
                (5, 0): Disc.BLACK,
                (5, 1): Disc.WHITE,
            },
            current_player=Disc.WHITE,
        )
        passed = pass_turn(state)
        assert passed.current_player is Disc.BLACK
        assert passed.skip_turn

    def test_pass_turn_is_noop_with_legal_moves(self, fresh_othello):
        assert pass_turn(fresh_othello) is fresh_othello

    def test_tied_game_has_no_winner(self):
        state = OthelloState(
            board=make_othello({(0, 0): Disc.BLACK, (5, 5): Disc.WHITE}).board,
            game_over=True,
        )
        assert state.winner is None
