"""
Tic-Tac-Toe Bot - Alpha-beta minimax for the three-mark variant.

Two regimes:
- Placement phase (bot holds fewer than three marks): plain search
- Relocation phase (bot holds three marks): search over placements and
  relocations, with a win-now check and a block check taking precedence

Search depth is 5 while both sides are under the mark cap and 4 once
either side reaches it.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import random

from .policy import BotPolicy, BotDecision
from .evaluator import TicTacToeEvaluator
from ..engine_core.action import Action, ActionType
from ..games.tictactoe import (
    MAX_MARKS,
    Move,
    Outcome,
    Side,
    TicTacToeState,
    apply_move,
    generate_moves,
    winning_moves,
)


log = logging.getLogger(__name__)


@dataclass
class MoveChoice:
    """A selected move with the reason it was picked."""
    move: Move
    score: float | None
    reason: str
    evaluated: int = 0


@dataclass
class TicTacToeBot(BotPolicy):
    """
    Tic-tac-toe opponent.

    Usage:
        bot = TicTacToeBot()
        move = bot.select_move(state)
        state = apply_move(state, move, bot.side)
    """
    side: Side = Side.OPPONENT
    evaluator: TicTacToeEvaluator = None  # type: ignore
    rng: random.Random = None  # type: ignore
    placement_depth: int = 5
    capped_depth: int = 4

    def __post_init__(self):
        if self.evaluator is None:
            self.evaluator = TicTacToeEvaluator()
        if self.rng is None:
            self.rng = random.Random()

    def select_move(self, state: TicTacToeState) -> Move | None:
        """Pick a move for the bot's side, or None if it cannot move."""
        choice = self.choose(state)
        return choice.move if choice else None

    def select_action(self, state: TicTacToeState, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        choice = self.choose(state)
        if choice is None:
            action = self.rng.choice(legal_actions)
            return BotDecision(action=action, explanation="No move found, picked randomly")

        for action in legal_actions:
            p = action.payload
            if (
                action.action_type == ActionType.PLACE_MARK
                and p.cell == choice.move.cell
                and p.source == choice.move.source
            ):
                break
        else:
            action = Action.place_mark(self.side, choice.move.cell, source=choice.move.source)

        return BotDecision(
            action=action,
            explanation=choice.reason,
            evaluated_actions=choice.evaluated,
            best_score=choice.score or 0.0,
        )

    def choose(self, state: TicTacToeState) -> MoveChoice | None:
        """
        Run the selection pipeline.

        1. Score every root move with alpha-beta search
        2. In the relocation phase, let win-now and block checks override
        3. Fall back to a random legal move if nothing scored
        """
        if state.game_over or state.turn is not self.side:
            return None

        moves = generate_moves(state, self.side)
        if not moves:
            return None

        depth = self.search_depth(state)
        scored = [(move, self._score_root_move(state, move, depth)) for move in moves]

        best_move, best_score = None, -math.inf
        for move, score in scored:
            if score > best_score:
                best_move, best_score = move, score

        if len(state.marks_of(self.side)) >= MAX_MARKS:
            override = self._safety_net(state, scored)
            if override is not None:
                log.debug("Safety net chose %s", override.move)
                return override

        if best_move is None:
            return MoveChoice(self.rng.choice(moves), None, "Random fallback", len(moves))

        return MoveChoice(
            best_move,
            best_score,
            f"Minimax depth {depth} score {best_score}",
            len(moves),
        )

    def search_depth(self, state: TicTacToeState) -> int:
        """Shallower search once either side is at the mark cap."""
        capped = (
            state.player_mark_count >= MAX_MARKS
            or state.opponent_mark_count >= MAX_MARKS
        )
        return self.capped_depth if capped else self.placement_depth

    def _score_root_move(self, state: TicTacToeState, move: Move, depth: int) -> float:
        child = apply_move(state, move, self.side)
        return self._minimax(child, depth - 1, 1, -math.inf, math.inf)

    def _minimax(
        self,
        state: TicTacToeState,
        depth: int,
        ply: int,
        alpha: float,
        beta: float,
    ) -> float:
        """Alpha-beta search; the bot's side maximizes."""
        if state.winner is Outcome.DRAW:
            return 0
        if state.winner is not None:
            winner = Side.PLAYER if state.winner is Outcome.PLAYER else Side.OPPONENT
            return self.evaluator.terminal_score(winner, self.side, ply)
        if depth <= 0:
            return self.evaluator.evaluate(state.board, self.side)

        mover = state.turn
        moves = generate_moves(state, mover)
        if not moves:
            return self.evaluator.evaluate(state.board, self.side)

        if mover is self.side:
            value = -math.inf
            for move in moves:
                value = max(value, self._minimax(apply_move(state, move, mover), depth - 1, ply + 1, alpha, beta))
                alpha = max(alpha, value)
                if alpha >= beta:
                    break
            return value

        value = math.inf
        for move in moves:
            value = min(value, self._minimax(apply_move(state, move, mover), depth - 1, ply + 1, alpha, beta))
            beta = min(beta, value)
            if alpha >= beta:
                break
        return value

    def _safety_net(
        self,
        state: TicTacToeState,
        scored: list[tuple[Move, float]],
    ) -> MoveChoice | None:
        """Immediate win first, then a block of the other side's immediate win."""
        wins = winning_moves(state, self.side)
        if wins:
            return MoveChoice(wins[0], self.evaluator.weights.win_score - 1, "Winning move", len(scored))

        enemy = self.side.other
        if not winning_moves(state, enemy):
            return None

        # Highest search score first; stable sort keeps iteration order on ties
        for move, score in sorted(scored, key=lambda item: item[1], reverse=True):
            child = apply_move(state, move, self.side)
            if not winning_moves(child, enemy):
                return MoveChoice(move, score, "Blocking move", len(scored))

        return None
