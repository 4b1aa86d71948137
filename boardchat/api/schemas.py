"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between the web UI and the
server. All responses include explicit types for OpenAPI generation.

Error Codes:
- SESSION_NOT_FOUND: Game session does not exist or has ended
- INVALID_MOVE: Move is not legal in the current position
- NOT_YOUR_TURN: Human move submitted while the opponent is to move
- GAME_OVER: The game has already finished
- UNKNOWN_GAME: Requested game is not hosted
"""

from enum import Enum
from typing import Literal, Optional, Any
from pydantic import BaseModel, Field

from ..games import GameKind


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Where a game session stands."""
    WAITING_HUMAN = "waiting_human"
    OPPONENT_PENDING = "opponent_pending"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_MOVE = "INVALID_MOVE"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    GAME_OVER = "GAME_OVER"
    UNKNOWN_GAME = "UNKNOWN_GAME"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Chat
# =============================================================================

class ChatMessage(BaseModel):
    """One role-tagged chat message."""
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    """Conversation so far plus the selected model."""
    messages: list[ChatMessage] = Field(..., min_length=1)
    model: Optional[str] = Field(None, description="Model id from GET /api/chat")
    game_session_id: Optional[str] = Field(
        None, description="Active game session, so a trigger word can toggle it off"
    )


class ChatResponse(BaseModel):
    """
    Reply for the UI.

    Always returned with HTTP 200; `fallback` marks a backend failure
    that was replaced by a canned reply.
    """
    reply: str
    model: Optional[str] = None
    fallback: bool = False

    # Game mode toggling
    game: Optional[GameKind] = None
    game_session_id: Optional[str] = None
    game_active: bool = False


class ModelsResponse(BaseModel):
    """
    Models the UI can offer, plus the opening assistant message.

    `default_model` goes over the wire as `defaultModel`, the key the
    chat page reads.
    """
    models: dict[str, str]
    default_model: str = Field(..., serialization_alias="defaultModel")
    greeting: str


# =============================================================================
# Games
# =============================================================================

class CreateGameRequest(BaseModel):
    """Start a new game session."""
    game: GameKind


class MoveRequest(BaseModel):
    """Human move: `cell` for tic-tac-toe, `row`/`col` for othello."""
    cell: Optional[int] = Field(None, ge=0, le=8)
    row: Optional[int] = Field(None, ge=0, le=5)
    col: Optional[int] = Field(None, ge=0, le=5)


class TicTacToeBoard(BaseModel):
    """Tic-tac-toe position for display."""
    cells: list[Optional[str]] = Field(description="9 cells: 'player', 'opponent' or null")
    turn: str
    player_marks: list[int] = Field(description="Player's marks, oldest first")
    opponent_marks: list[int] = Field(description="Opponent's marks, oldest first")
    player_mark_count: int
    opponent_mark_count: int
    half_moves: int
    max_half_moves: int
    legal_cells: list[int] = Field(default_factory=list)


class OthelloBoard(BaseModel):
    """Othello position for display."""
    grid: list[list[Optional[str]]] = Field(description="6x6 rows: 'black', 'white' or null")
    current_player: str
    black_count: int
    white_count: int
    skip_turn: bool
    last_move: Optional[list[int]] = None
    legal_moves: list[list[int]] = Field(default_factory=list)


class GameStateResponse(BaseModel):
    """Complete game state for rendering."""
    session_id: str
    game: GameKind
    status: GameStatus
    game_over: bool
    winner: Optional[str] = Field(None, description="Winning side or 'draw'")
    turn_number: int = 0
    tictactoe: Optional[TicTacToeBoard] = None
    othello: Optional[OthelloBoard] = None


class MoveResponse(BaseModel):
    """Result of a human or opponent move."""
    session_id: str
    success: bool = True
    changes: list[str] = Field(default_factory=list)
    opponent_actions: list[str] = Field(default_factory=list)
    opponent_pending: bool = False
    opponent_delay_ms: int = Field(0, description="Pause before requesting the opponent move")
    state: GameStateResponse


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
