"""
Othello Bot - Corner-first, one-ply lookahead opponent.

Selection order:
1. No legal move: pass
2. Any corner available: best corner by static evaluation
3. Otherwise: for each move assume the best reply for the other side
   (the reply minimizing our evaluation) and keep the move whose worst
   case is highest
4. Fallback: static evaluation alone, then a random legal move

The bot does NOT search deeper than one reply.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math
import random

from .policy import BotPolicy, BotDecision
from .evaluator import OthelloEvaluator
from ..engine_core.action import Action, ActionType
from ..games.othello import CORNERS, Disc, OthelloState, find_legal_moves, place_disc

log = logging.getLogger(__name__)

Square = tuple[int, int]


@dataclass
class OthelloBot(BotPolicy):
    """
    Othello opponent playing White by default.

    Usage:
        bot = OthelloBot()
        move = bot.select_move(state)
        if move is None:
            state = pass_turn(state)
        else:
            state = apply_move(state, *move)
    """
    side: Disc = Disc.WHITE
    evaluator: OthelloEvaluator = None  # type: ignore
    rng: random.Random = None  # type: ignore

    def __post_init__(self):
        if self.evaluator is None:
            self.evaluator = OthelloEvaluator()
        if self.rng is None:
            self.rng = random.Random()

    def select_move(self, state: OthelloState) -> Square | None:
        """Pick a square for the bot's side, or None when it has to pass."""
        move, _, _ = self._choose(state.board)
        return move

    def select_action(self, state: OthelloState, legal_actions: list[Action]) -> BotDecision:
        if not legal_actions:
            raise ValueError("No legal actions available")

        move, score, reason = self._choose(state.board)
        if move is None:
            passes = [a for a in legal_actions if a.action_type == ActionType.PASS]
            action = passes[0] if passes else Action.pass_turn(self.side)
            return BotDecision(action=action, explanation=reason)

        for action in legal_actions:
            if (action.payload.row, action.payload.col) == move:
                break
        else:
            action = Action.place_disc(self.side, *move)

        return BotDecision(
            action=action,
            explanation=reason,
            evaluated_actions=len(legal_actions),
            best_score=score if score is not None else 0.0,
        )

    def _choose(self, board) -> tuple[Square | None, float | None, str]:
        moves = find_legal_moves(board, self.side)
        if not moves:
            return None, None, "No legal move, passing"

        corners = [m for m in moves if m in CORNERS]
        if corners:
            move, score = self._best_by_static(board, corners)
            return move, score, "Corner move"

        move, score = self._best_by_lookahead(board, moves)
        if move is not None:
            return move, score, f"Lookahead score {score}"

        move, score = self._best_by_static(board, moves)
        if move is not None:
            return move, score, f"Static score {score}"

        log.debug("No scored move, choosing randomly among %d", len(moves))
        return self.rng.choice(moves), None, "Random fallback"

    def _best_by_static(self, board, candidates: list[Square]) -> tuple[Square | None, float | None]:
        """First candidate with the highest evaluation of the resulting board."""
        best_move, best_score = None, -math.inf
        for row, col in candidates:
            after = place_disc(board, row, col, self.side)
            score = self.evaluator.evaluate(after, self.side)
            if score > best_score:
                best_move, best_score = (row, col), score
        return best_move, (best_score if best_move is not None else None)

    def _best_by_lookahead(self, board, candidates: list[Square]) -> tuple[Square | None, float | None]:
        """Maximize the worst case over the other side's replies."""
        enemy = self.side.other
        pass_bonus = self.evaluator.weights.pass_bonus
        best_move, best_score = None, -math.inf

        for row, col in candidates:
            after = place_disc(board, row, col, self.side)
            replies = find_legal_moves(after, enemy)
            if not replies:
                score = self.evaluator.evaluate(after, self.side) + pass_bonus
            else:
                score = min(
                    self.evaluator.evaluate(place_disc(after, r, c, enemy), self.side)
                    for r, c in replies
                )
            if score > best_score:
                best_move, best_score = (row, col), score

        return best_move, (best_score if best_move is not None else None)
