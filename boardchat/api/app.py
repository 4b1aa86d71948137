"""
FastAPI Application - REST API for the chat UI.

Endpoints:
    GET    /api/chat                       Model options and default model
    POST   /api/chat                       Chat reply (or game mode toggle)
    POST   /api/v1/games                   Create game session
    GET    /api/v1/games                   List active sessions
    GET    /api/v1/games/{id}              Get board state
    DELETE /api/v1/games/{id}              End session
    POST   /api/v1/games/{id}/moves        Submit the human's move
    POST   /api/v1/games/{id}/opponent     Play the opponent's move
    GET    /api/v1/health                  Health check

Opponent Flow:
    1. POST /moves applies the human's move
    2. If `opponent_pending` is true the UI waits `opponent_delay_ms`
    3. POST /opponent plays the engine's reply

The chat endpoint always answers HTTP 200: backend failures come back
as a fallback reply with `fallback=true`.
"""

from typing import Optional, Union
import logging

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import SETTINGS
from .service import APIService
from .schemas import (
    ChatRequest,
    ChatResponse,
    ModelsResponse,
    CreateGameRequest,
    MoveRequest,
    GameStateResponse,
    MoveResponse,
    ErrorResponse,
    ErrorCode,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
)

log = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Boardchat API",
        description="""
Chat assistant with two built-in board games played against the server.

## Game Mode

Sending exactly `マルバツ` or `オセロ` (or `tic tac toe` / `othello`) as a chat
message toggles that game on, or off again if it is already active.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist or has ended |
| `INVALID_MOVE` | Move is not legal in the current position |
| `NOT_YOUR_TURN` | The opponent is to move |
| `GAME_OVER` | The game has already finished |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # CORS for the web UI
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(SETTINGS.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def error_status(error: ErrorResponse) -> int:
        if error.error_code == ErrorCode.SESSION_NOT_FOUND:
            return 404
        if error.error_code == ErrorCode.INTERNAL_ERROR:
            return 500
        return 400

    # =========================================================================
    # Chat Endpoints
    # =========================================================================

    @app.get(
        "/api/chat",
        response_model=ModelsResponse,
        tags=["Chat"],
        summary="List selectable models",
    )
    async def list_models() -> ModelsResponse:
        """Model ids with display labels, the default model and the greeting."""
        return api_service.list_models()

    @app.post(
        "/api/chat",
        response_model=ChatResponse,
        tags=["Chat"],
        summary="Send the conversation and get a reply",
    )
    def chat(request: ChatRequest) -> ChatResponse:
        """
        Reply to the conversation.

        A game trigger as the last user message toggles game mode instead
        of calling the chat backend.
        """
        return api_service.chat(request)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameStateResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Create a new game session",
    )
    async def create_game(request: CreateGameRequest) -> Union[GameStateResponse, JSONResponse]:
        """Start a game with the human to move."""
        try:
            return api_service.create_game(request)
        except ValueError as e:
            return make_error_response(ErrorCode.UNKNOWN_GAME, str(e))

    @app.get(
        "/api/v1/games",
        response_model=SessionListResponse,
        tags=["Games"],
        summary="List active game sessions",
    )
    async def list_games() -> SessionListResponse:
        return api_service.list_games()

    @app.get(
        "/api/v1/games/{session_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get the board state",
    )
    async def get_game(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_game(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response.error_code, response.error, status_code=404)
        return response

    @app.delete(
        "/api/v1/games/{session_id}",
        response_model=EndSessionResponse,
        tags=["Games"],
        summary="End a game session",
    )
    async def end_game(
        session_id: str,
        reason: str = Query("user_ended", description="Reason for ending"),
    ) -> EndSessionResponse:
        """End a game session and release resources."""
        return api_service.end_game(session_id, reason)

    @app.post(
        "/api/v1/games/{session_id}/moves",
        response_model=MoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Illegal move or not your turn"},
            404: {"model": ErrorResponse},
        },
        tags=["Games"],
        summary="Submit the human's move",
    )
    def submit_move(
        session_id: str, request: MoveRequest
    ) -> Union[MoveResponse, JSONResponse]:
        """
        Apply the human's move.

        The opponent does not move here; when `opponent_pending` is set
        call `POST /opponent` after `opponent_delay_ms`.
        """
        response = api_service.submit_move(session_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(
                response.error_code,
                response.error,
                status_code=error_status(response),
                details=response.details,
            )
        return response

    @app.post(
        "/api/v1/games/{session_id}/opponent",
        response_model=MoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Not the opponent's turn"},
            404: {"model": ErrorResponse},
            500: {"model": ErrorResponse, "description": "Engine rejected the opponent's move"},
        },
        tags=["Games"],
        summary="Play the opponent's move",
    )
    def run_opponent(session_id: str) -> Union[MoveResponse, JSONResponse]:
        """Let the engine pick and play its move."""
        response = api_service.run_opponent(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(
                response.error_code,
                response.error,
                status_code=error_status(response),
                details=response.details,
            )
        return response

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="boardchat",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Boardchat API",
            "version": __version__,
            "docs": "/api/docs",
            "health": "/api/v1/health",
        }

    log.debug("Created app (env=%s)", SETTINGS.env)
    return app


# For running directly: uvicorn boardchat.api.app:app
app = create_app()
