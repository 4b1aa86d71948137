"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when the user toggles game mode on
- Holds the current game state and the opponent bot
- Alternates human moves and bot moves
- Destroyed when the game ends or game mode is toggled off

Sessions are EPHEMERAL:
- No persistence to database
- Nothing survives a server restart
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
