"""
Chat - Boundary to the language-model backend.

The chat layer:
1. Forwards role-tagged messages to an OpenAI-compatible backend
2. Turns backend failures into a user-safe fallback reply
3. Routes exact game trigger words to game mode instead

The backend is NEVER used for gameplay decisions.
"""

from .client import ChatClient, ChatReply
from .commands import detect_game_command, GAME_TRIGGERS, GAME_NAMES
from .prompts import ChatPrompts, MODEL_OPTIONS

__all__ = [
    "ChatClient",
    "ChatReply",
    "detect_game_command",
    "GAME_TRIGGERS",
    "GAME_NAMES",
    "ChatPrompts",
    "MODEL_OPTIONS",
]
