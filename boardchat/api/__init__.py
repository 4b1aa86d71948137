"""
API Module - Web UI interface.

Exposes the chat backend and the game engines via REST API.
The web UI:
1. Sends the conversation and receives a reply
2. Toggles game mode with a trigger word
3. Submits human moves and requests opponent moves
4. Renders the returned board state

All game state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    ChatMessage,
    ChatRequest,
    CreateGameRequest,
    MoveRequest,
    # Responses
    ChatResponse,
    ModelsResponse,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Shared
    TicTacToeBoard,
    OthelloBoard,
    GameStatus,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "ChatMessage",
    "ChatRequest",
    "CreateGameRequest",
    "MoveRequest",
    # Responses
    "ChatResponse",
    "ModelsResponse",
    "GameStateResponse",
    "MoveResponse",
    "ErrorResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    # Shared
    "TicTacToeBoard",
    "OthelloBoard",
    "GameStatus",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
