"""
Game Loop - Alternates human moves and opponent moves for one session.

The loop:
1. Human submits a move (rejected unless it is the human's turn)
2. Engine validates and applies it
3. Presentation layer waits `opponent_delay_ms`
4. Presentation layer calls run_opponent()
5. Repeat until the game is over

Each loop holds a lock around the turn check and the commit, so two
overlapping requests for the same session cannot both play a move.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import threading

from ..config import SETTINGS
from ..engine_core import Action, ErrorCode, Reducer, legal_actions
from ..games.tictactoe import TicTacToeState
from .manager import Session, SessionState

log = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    WAITING_HUMAN = "waiting_human"
    OPPONENT_PENDING = "opponent_pending"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of processing a move.

    Contains what changed, what the opponent did and whether the
    presentation layer should schedule the opponent's move.
    """
    success: bool
    loop_state: LoopState

    changes: list[str] = field(default_factory=list)
    opponent_actions: list[str] = field(default_factory=list)

    error: str | None = None
    error_code: str | None = None

    # Game over info
    winner: str | None = None

    @property
    def opponent_pending(self) -> bool:
        return self.loop_state == LoopState.OPPONENT_PENDING


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(session)
        result = loop.submit_human_move(cell=4)
        if result.opponent_pending:
            # after opponent_delay_ms
            result = loop.run_opponent()
    """

    def __init__(self, session: Session, opponent_delay_ms: int | None = None):
        self.session = session
        self.reducer = Reducer()
        self._lock = threading.Lock()
        self.opponent_delay_ms = (
            opponent_delay_ms if opponent_delay_ms is not None else SETTINGS.opponent_delay_ms
        )

    @property
    def loop_state(self) -> LoopState:
        state = self.session.game_state
        if state is None or state.game_over:
            return LoopState.GAME_OVER
        if self.session.is_human_turn():
            return LoopState.WAITING_HUMAN
        return LoopState.OPPONENT_PENDING

    def submit_human_move(
        self,
        cell: int | None = None,
        row: int | None = None,
        col: int | None = None,
    ) -> TurnResult:
        """Apply the human's move: `cell` for tic-tac-toe, `row`/`col` for othello."""
        with self._lock:
            return self._submit_human_move(cell, row, col)

    def _submit_human_move(self, cell: int | None, row: int | None, col: int | None) -> TurnResult:
        session = self.session
        state = session.game_state

        if state is None or state.game_over:
            return self._failure("Game is over", ErrorCode.GAME_OVER)
        if not session.is_human_turn():
            return self._failure("Wait for the opponent's move", ErrorCode.NOT_YOUR_TURN)

        if isinstance(state, TicTacToeState):
            if cell is None:
                return self._failure("A cell is required", ErrorCode.VALIDATION_ERROR)
            action = Action.place_mark(session.human_side, cell)
        else:
            if row is None or col is None:
                return self._failure("A row and column are required", ErrorCode.VALIDATION_ERROR)
            action = Action.place_disc(session.human_side, row, col)

        result = self.reducer.apply(state, action)
        if not result.success:
            return self._failure(result.error, result.error_code)

        self._commit(result.new_state)
        return self._result(changes=result.state_changes)

    def run_opponent(self) -> TurnResult:
        """
        Play the opponent's move(s).

        In othello the opponent keeps the turn while the human is
        force-passed, so this may play several moves.
        """
        with self._lock:
            return self._run_opponent()

    def _run_opponent(self) -> TurnResult:
        session = self.session
        if session.game_state is None or session.game_state.game_over:
            return self._failure("Game is over", ErrorCode.GAME_OVER)
        if session.is_human_turn():
            return self._failure("It is the human's turn", ErrorCode.NOT_YOUR_TURN)

        changes: list[str] = []
        opponent_actions: list[str] = []
        while not session.game_state.game_over and not session.is_human_turn():
            state = session.game_state
            decision = session.bot.select_action(state, legal_actions(state))
            result = self.reducer.apply(state, decision.action)
            if not result.success:
                log.error("Bot chose an illegal action %s: %s", decision.action.describe(), result.error)
                return self._failure(result.error, ErrorCode.INTERNAL_ERROR)

            log.debug("Opponent: %s (%s)", decision.action.describe(), decision.explanation)
            opponent_actions.append(decision.action.describe())
            changes.extend(result.state_changes)
            self._commit(result.new_state)

        return self._result(changes=changes, opponent_actions=opponent_actions)

    def _commit(self, new_state: Any):
        self.session.game_state = new_state
        self.session.turn_number += 1
        if new_state.game_over:
            self.session.state = SessionState.GAME_OVER

    def _winner(self) -> str | None:
        state = self.session.game_state
        if state is None or not state.game_over:
            return None
        winner = state.winner
        if winner is None:
            return "draw"
        return winner.value

    def _result(self, changes: list[str], opponent_actions: list[str] | None = None) -> TurnResult:
        return TurnResult(
            success=True,
            loop_state=self.loop_state,
            changes=changes,
            opponent_actions=opponent_actions or [],
            winner=self._winner(),
        )

    def _failure(self, error: str | None, code: ErrorCode | None) -> TurnResult:
        return TurnResult(
            success=False,
            loop_state=self.loop_state,
            error=error,
            error_code=code.value if code else None,
        )
