"""
Engine Core - Action dispatch over the game rule modules.

The engine is the runtime that:
1. Generates legal actions for the side to move
2. Validates actions against the current state
3. Applies actions via the reducer
4. Records successful actions in the state's history
"""

from .action import Action, ActionType, ActionPayload, ActionResult, ErrorCode
from .reducer import Reducer, apply_action
from .action_generator import ActionGenerator, legal_actions, is_legal

__all__ = [
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "ErrorCode",
    "Reducer",
    "apply_action",
    "ActionGenerator",
    "legal_actions",
    "is_legal",
]
