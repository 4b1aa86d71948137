"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. Bots to enumerate possible moves
2. UI to show available moves
3. Validation (is this action in legal_actions?)

Design: Generates Action objects, not just coordinates.
This ensures all generated actions are fully specified.
"""

from __future__ import annotations
from dataclasses import dataclass

from .action import Action, ActionType
from ..games.tictactoe import TicTacToeState, generate_moves
from ..games.othello import OthelloState, find_legal_moves


@dataclass
class ActionGenerator:
    """Generates legal actions for the side to move."""

    def generate(self, state: TicTacToeState | OthelloState) -> list[Action]:
        """
        Generate all legal actions for the side to move.

        Returns a list of fully-specified Action objects.
        """
        if state.game_over:
            return []

        if isinstance(state, TicTacToeState):
            return self._generate_mark_actions(state)
        return self._generate_disc_actions(state)

    def _generate_mark_actions(self, state: TicTacToeState) -> list[Action]:
        side = state.turn
        return [
            Action.place_mark(side, move.cell, source=move.source)
            for move in generate_moves(state, side)
        ]

    def _generate_disc_actions(self, state: OthelloState) -> list[Action]:
        side = state.current_player
        moves = find_legal_moves(state.board, side)
        if not moves:
            # Forced pass is the only option
            return [Action.pass_turn(side)]
        return [Action.place_disc(side, row, col) for row, col in moves]


def legal_actions(state: TicTacToeState | OthelloState) -> list[Action]:
    """
    Convenience function to get legal actions.

    Creates an ActionGenerator and generates actions.
    """
    generator = ActionGenerator()
    return generator.generate(state)


def is_legal(state: TicTacToeState | OthelloState, action: Action) -> bool:
    """Check if a specific action is legal."""
    for a in legal_actions(state):
        if a.action_type != action.action_type:
            continue
        p, q = a.payload, action.payload
        if action.action_type == ActionType.PLACE_MARK:
            if (p.cell, p.source) == (q.cell, q.source):
                return True
        elif action.action_type == ActionType.PLACE_DISC:
            if (p.row, p.col) == (q.row, q.col):
                return True
        else:
            return True
    return False
