"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure
- Illegal moves never raise; the result carries the unchanged state
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .action import Action, ActionType, ActionResult, ErrorCode
from ..games.tictactoe import TicTacToeState, MAX_MARKS, is_legal_placement, is_legal_relocation, apply_placement
from ..games.othello import OthelloState, count_discs, find_legal_moves, apply_move, pass_turn

log = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in the game state objects.
    """

    def apply(self, state: TicTacToeState | OthelloState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        validation = self._validate_action(state, action)
        if validation:
            error, code = validation
            log.debug("Rejected %s: %s", action.describe(), error)
            return ActionResult.failure(error, error_code=code, state=state)

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=ErrorCode.NO_HANDLER,
                state=state,
            )

        result = handler(state, action)
        # Log action to history if successful
        if result.success and result.new_state is not None:
            result.new_state.action_history.append(action)
        return result

    def _validate_action(
        self,
        state: TicTacToeState | OthelloState,
        action: Action,
    ) -> tuple[str, ErrorCode] | None:
        """
        Validate that an action is legal in the current state.

        Returns (message, code) if invalid, None if valid.
        """
        if state.game_over:
            return "Game is over - no moves allowed", ErrorCode.GAME_OVER

        side = action.payload.side
        mover = state.turn if isinstance(state, TicTacToeState) else state.current_player
        if side is not None and side is not mover:
            return f"Not {side.value}'s turn", ErrorCode.NOT_YOUR_TURN

        p = action.payload
        if action.action_type == ActionType.PLACE_MARK:
            if not isinstance(state, TicTacToeState) or p.cell is None:
                return "Mark placement needs a tic-tac-toe game and a cell", ErrorCode.INVALID_MOVE
            if p.source is None:
                legal = is_legal_placement(state, p.cell, state.turn)
            else:
                legal = is_legal_relocation(state, p.source, p.cell, state.turn)
            if not legal:
                return f"Cell {p.cell} is not a legal move", ErrorCode.INVALID_MOVE

        elif action.action_type == ActionType.PLACE_DISC:
            if not isinstance(state, OthelloState) or p.row is None or p.col is None:
                return "Disc placement needs an othello game, a row and a column", ErrorCode.INVALID_MOVE
            if (p.row, p.col) not in find_legal_moves(state.board, state.current_player):
                return f"({p.row}, {p.col}) is not a legal move", ErrorCode.INVALID_MOVE

        elif action.action_type == ActionType.PASS:
            if not isinstance(state, OthelloState):
                return "Only othello allows passing", ErrorCode.INVALID_MOVE
            if find_legal_moves(state.board, state.current_player):
                return "Cannot pass while a legal move exists", ErrorCode.INVALID_MOVE

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLACE_MARK: self._handle_place_mark,
            ActionType.PLACE_DISC: self._handle_place_disc,
            ActionType.PASS: self._handle_pass,
        }
        return handlers.get(action_type)

    def _handle_place_mark(self, state: TicTacToeState, action: Action) -> ActionResult:
        """Handle a tic-tac-toe placement or relocation."""
        side = state.turn
        p = action.payload
        lifted = None
        marks = state.marks_of(side)
        if p.source is not None:
            lifted = p.source
        elif len(marks) >= MAX_MARKS:
            lifted = marks[0]

        new_state = apply_placement(state, p.cell, side, source=p.source)

        changes = [action.describe()]
        if lifted is not None:
            changes.append(f"{side.value} mark on {lifted} removed")
        if new_state.winner is not None:
            changes.append(f"Game over: {new_state.winner.value}")
        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_place_disc(self, state: OthelloState, action: Action) -> ActionResult:
        """Handle an othello disc placement."""
        p = action.payload
        new_state = apply_move(state, p.row, p.col)
        mover = state.current_player
        flipped = count_discs(new_state.board, mover) - count_discs(state.board, mover) - 1

        changes = [action.describe(), f"{flipped} disc(s) flipped"]
        if new_state.skip_turn:
            changes.append(f"{new_state.current_player.other.value} has no move and passes")
        if new_state.game_over:
            changes.append("Game over")
        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_pass(self, state: OthelloState, action: Action) -> ActionResult:
        """Handle a forced othello pass."""
        new_state = pass_turn(state)
        changes = [action.describe()]
        if new_state.game_over:
            changes.append("Game over")
        return ActionResult.success_with_state(new_state, changes=changes)


def apply_action(state: TicTacToeState | OthelloState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer()
    return reducer.apply(state, action)
