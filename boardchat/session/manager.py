"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. A chat message matching a game trigger (or an API call) creates a session
2. During the game:
   - Human submits a move, the engine validates and applies it
   - The presentation layer waits a fixed delay, then asks for the
     opponent's move
3. Game ends or the user toggles game mode off -> session destroyed

PERSISTENCE RULES:
- NO database
- Game state is ephemeral (in-memory, session-scoped only)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import random
import time
import uuid

from ..bots import BotPolicy, OthelloBot, TicTacToeBot
from ..config import SETTINGS
from ..games import GameKind
from ..games.othello import Disc, OthelloState
from ..games.tictactoe import Side, TicTacToeState

log = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Game completed
    ABANDONED = "abandoned"  # User quit


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The game kind and its current canonical state
    - The bot playing the opponent's side
    - Session metadata

    The session is destroyed when the game ends.
    State is NOT persisted.
    """
    session_id: str
    game: GameKind
    created_at: float

    state: SessionState = SessionState.ACTIVE
    game_state: TicTacToeState | OthelloState | None = None
    bot: BotPolicy | None = None

    human_side: Any = None
    opponent_side: Any = None
    turn_number: int = 0

    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        """Check if session is still active."""
        return self.state == SessionState.ACTIVE

    def side_to_move(self) -> Any:
        if isinstance(self.game_state, TicTacToeState):
            return self.game_state.turn
        return self.game_state.current_player

    def is_human_turn(self) -> bool:
        """Check if it's the human player's turn."""
        if not self.game_state or self.game_state.game_over:
            return False
        return self.side_to_move() is self.human_side


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions for a game kind
    - Track active sessions
    - Clean up completed sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, tictactoe_max_half_moves: int | None = None):
        self._sessions: dict[str, Session] = {}
        self.tictactoe_max_half_moves = (
            tictactoe_max_half_moves or SETTINGS.tictactoe_max_half_moves
        )

    def create_session(
        self,
        game: GameKind,
        rng: random.Random | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            game: Which game to host
            rng: Randomness for the opening and bot fallbacks

        Returns:
            New Session with the human to move
        """
        rng = rng or random.Random()
        session_id = str(uuid.uuid4())

        if game == GameKind.TICTACTOE:
            game_state = TicTacToeState.new_game(
                rng=rng,
                max_half_moves=self.tictactoe_max_half_moves,
            )
            bot = TicTacToeBot(side=Side.OPPONENT, rng=rng)
            human_side, opponent_side = Side.PLAYER, Side.OPPONENT
        elif game == GameKind.OTHELLO:
            game_state = OthelloState.new_game()
            bot = OthelloBot(side=Disc.WHITE, rng=rng)
            human_side, opponent_side = Disc.BLACK, Disc.WHITE
        else:
            raise ValueError(f"Unknown game: {game}")

        session = Session(
            session_id=session_id,
            game=game,
            created_at=time.time(),
            game_state=game_state,
            bot=bot,
            human_side=human_side,
            opponent_side=opponent_side,
        )

        self._sessions[session_id] = session
        log.info("Created %s session %s", game.value, session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and clean up.

        The session is removed from memory.
        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if reason == "completed":
            session.state = SessionState.GAME_OVER
        else:
            session.state = SessionState.ABANDONED
        session.game_state = None
        log.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int | None = None) -> int:
        """
        Remove sessions older than max_age.

        Returns the number of sessions removed.
        """
        max_age = max_age_seconds if max_age_seconds is not None else SETTINGS.session_max_age_s
        current_time = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
