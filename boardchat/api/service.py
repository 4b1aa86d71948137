"""
API Service - Business logic layer between API and engine.

The service:
1. Forwards chat to the backend, or toggles game mode on trigger words
2. Manages game sessions and their loops
3. Formats engine state for the UI

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
Errors come back as ErrorResponse objects rather than exceptions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    ChatRequest,
    ChatResponse,
    ModelsResponse,
    CreateGameRequest,
    MoveRequest,
    GameStateResponse,
    GameStatus,
    MoveResponse,
    TicTacToeBoard,
    OthelloBoard,
    ErrorResponse,
    ErrorCode,
    SessionListResponse,
    EndSessionResponse,
)
from ..chat import ChatClient, ChatPrompts, MODEL_OPTIONS, GAME_NAMES, detect_game_command
from ..config import SETTINGS
from ..games import GameKind
from ..games.othello import OthelloState, find_legal_moves
from ..games.tictactoe import TicTacToeState, is_legal_placement
from ..session import SessionManager, Session, GameLoop, TurnResult

log = logging.getLogger(__name__)


def _error_code(engine_code: str | None) -> ErrorCode:
    """Map an engine rejection code onto the API error codes."""
    if engine_code == "NO_HANDLER":
        return ErrorCode.INTERNAL_ERROR
    try:
        return ErrorCode(engine_code)
    except ValueError:
        return ErrorCode.INVALID_MOVE


@dataclass
class APIService:
    """
    Main API service for the web UI.

    Usage:
        service = APIService()

        # Chat (or toggle a game)
        reply = service.chat(ChatRequest(messages=[...]))

        # Play
        state = service.create_game(CreateGameRequest(game="othello"))
        result = service.submit_move(state.session_id, MoveRequest(row=1, col=2))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    chat_client: ChatClient = field(default_factory=ChatClient)
    opponent_delay_ms: int = field(default_factory=lambda: SETTINGS.opponent_delay_ms)
    session_max_age_s: int = field(default_factory=lambda: SETTINGS.session_max_age_s)

    # Game loops per session
    _game_loops: dict[str, GameLoop] = field(default_factory=dict)

    # =========================================================================
    # Chat
    # =========================================================================

    def list_models(self) -> ModelsResponse:
        return ModelsResponse(
            models=dict(MODEL_OPTIONS),
            default_model=self.chat_client.resolve_model(None),
            greeting=ChatPrompts.greeting(),
        )

    def chat(self, request: ChatRequest) -> ChatResponse:
        """
        Reply to the conversation.

        An exact game trigger as the last user message toggles game mode
        and never reaches the backend.
        """
        last = request.messages[-1]
        game = detect_game_command(last.content) if last.role == "user" else None
        if game is not None:
            return self._toggle_game(game, request.game_session_id)

        messages = [m.model_dump() for m in request.messages]
        result = self.chat_client.reply(messages, model=request.model)
        return ChatResponse(reply=result.reply, model=result.model, fallback=result.fallback)

    def _toggle_game(self, game: GameKind, active_session_id: str | None) -> ChatResponse:
        name = GAME_NAMES[game]
        log.info("Game trigger for %s (active session: %s)", game.value, active_session_id)
        active = self.session_manager.get_session(active_session_id) if active_session_id else None

        if active is not None and active.game == game:
            self.end_game(active.session_id, reason="toggled_off")
            return ChatResponse(reply=ChatPrompts.game_ended(name), game=game, game_active=False)

        if active is not None:
            self.end_game(active.session_id, reason="switched")

        state = self.create_game(CreateGameRequest(game=game))
        return ChatResponse(
            reply=ChatPrompts.game_started(name),
            game=game,
            game_session_id=state.session_id,
            game_active=True,
        )

    # =========================================================================
    # Games
    # =========================================================================

    def create_game(self, request: CreateGameRequest) -> GameStateResponse:
        self.cleanup_stale_games()
        session = self.session_manager.create_session(request.game)
        self._game_loops[session.session_id] = GameLoop(
            session, opponent_delay_ms=self.opponent_delay_ms
        )
        return self._convert_game_state(session)

    def get_game(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._convert_game_state(session)

    def submit_move(self, session_id: str, request: MoveRequest) -> MoveResponse | ErrorResponse:
        """Apply the human's move; the opponent is NOT run here."""
        loop = self._game_loops.get(session_id)
        if loop is None:
            return self._not_found(session_id)

        result = loop.submit_human_move(cell=request.cell, row=request.row, col=request.col)
        return self._convert_turn_result(loop.session, result)

    def run_opponent(self, session_id: str) -> MoveResponse | ErrorResponse:
        """Play the opponent's pending move."""
        loop = self._game_loops.get(session_id)
        if loop is None:
            return self._not_found(session_id)

        result = loop.run_opponent()
        return self._convert_turn_result(loop.session, result)

    def end_game(self, session_id: str, reason: str = "user_ended") -> EndSessionResponse:
        self._game_loops.pop(session_id, None)
        success = self.session_manager.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    def list_games(self) -> SessionListResponse:
        sessions = self.session_manager.list_active_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    def cleanup_stale_games(self, max_age_seconds: int | None = None) -> int:
        """
        Drop sessions older than max_age, together with their loops.

        Runs on every game creation. Returns the number of sessions removed.
        """
        max_age = max_age_seconds if max_age_seconds is not None else self.session_max_age_s
        removed = self.session_manager.cleanup_stale_sessions(max_age)
        for session_id in list(self._game_loops):
            if self.session_manager.get_session(session_id) is None:
                del self._game_loops[session_id]
        if removed:
            log.info("Removed %d stale game session(s)", removed)
        return removed

    # =========================================================================
    # Conversion Helpers
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _convert_turn_result(self, session: Session, result: TurnResult) -> MoveResponse | ErrorResponse:
        if not result.success:
            return ErrorResponse(
                error=result.error or "Move rejected",
                error_code=_error_code(result.error_code),
                details={"status": result.loop_state.value},
            )

        return MoveResponse(
            session_id=session.session_id,
            changes=result.changes,
            opponent_actions=result.opponent_actions,
            opponent_pending=result.opponent_pending,
            opponent_delay_ms=self.opponent_delay_ms if result.opponent_pending else 0,
            state=self._convert_game_state(session),
        )

    def _convert_game_state(self, session: Session) -> GameStateResponse:
        state = session.game_state
        loop = self._game_loops.get(session.session_id)
        status = GameStatus(loop.loop_state.value) if loop else GameStatus.WAITING_HUMAN

        winner = None
        if state.game_over:
            winner = state.winner.value if state.winner is not None else "draw"

        response = GameStateResponse(
            session_id=session.session_id,
            game=session.game,
            status=status,
            game_over=state.game_over,
            winner=winner,
            turn_number=session.turn_number,
        )
        if isinstance(state, TicTacToeState):
            response.tictactoe = self._convert_tictactoe(state)
        elif isinstance(state, OthelloState):
            response.othello = self._convert_othello(state)
        return response

    def _convert_tictactoe(self, state: TicTacToeState) -> TicTacToeBoard:
        return TicTacToeBoard(
            cells=[cell.value if cell else None for cell in state.board],
            turn=state.turn.value,
            player_marks=list(state.player_marks),
            opponent_marks=list(state.opponent_marks),
            player_mark_count=state.player_mark_count,
            opponent_mark_count=state.opponent_mark_count,
            half_moves=state.half_moves,
            max_half_moves=state.max_half_moves,
            legal_cells=[
                cell for cell in range(9)
                if is_legal_placement(state, cell, state.turn)
            ],
        )

    def _convert_othello(self, state: OthelloState) -> OthelloBoard:
        legal = [] if state.game_over else find_legal_moves(state.board, state.current_player)
        return OthelloBoard(
            grid=[[sq.value if sq else None for sq in row] for row in state.board],
            current_player=state.current_player.value,
            black_count=state.black_count,
            white_count=state.white_count,
            skip_turn=state.skip_turn,
            last_move=list(state.last_move) if state.last_move else None,
            legal_moves=[[r, c] for r, c in legal],
        )
