"""
Games module - Game-specific implementations.

Each game has its own subpackage with:
- State dataclass (immutable-friendly, transitions return new state)
- Pure rule functions (legality, move application, termination)
"""

from enum import Enum


class GameKind(str, Enum):
    """Games that can be hosted in a chat session."""
    TICTACTOE = "tictactoe"
    OTHELLO = "othello"
