"""
Action System - Actions, payloads, and results.

Actions represent:
1. Tic-tac-toe placements and relocations
2. Othello disc placements
3. Forced passes

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    # Tic-tac-toe
    PLACE_MARK = "place_mark"

    # Othello
    PLACE_DISC = "place_disc"
    PASS = "pass"


class ErrorCode(str, Enum):
    """Structured failure codes carried by ActionResult."""
    INVALID_MOVE = "INVALID_MOVE"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    GAME_OVER = "GAME_OVER"
    NO_HANDLER = "NO_HANDLER"
    VALIDATION_ERROR = "VALIDATION_ERROR"  # Move request missing its coordinates
    INTERNAL_ERROR = "INTERNAL_ERROR"  # Bot produced a move the reducer rejected


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields.
    Validation happens in the reducer.
    """
    # Who is acting: a tictactoe Side or an othello Disc
    side: Any | None = None

    # Tic-tac-toe
    cell: int | None = None
    source: int | None = None  # Relocation origin

    # Othello
    row: int | None = None
    col: int | None = None

    # Generic params
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class Action:
    """
    A complete action to be applied to a game state.

    Actions are:
    - Logged for replay
    - Validated before application
    - Applied atomically by the reducer
    """
    action_type: ActionType
    payload: ActionPayload
    timestamp: float | None = None
    action_id: str | None = None

    @classmethod
    def place_mark(cls, side: Any, cell: int, source: int | None = None) -> Action:
        """Factory for a tic-tac-toe placement (or relocation when source is set)."""
        return cls(
            action_type=ActionType.PLACE_MARK,
            payload=ActionPayload(side=side, cell=cell, source=source),
        )

    @classmethod
    def place_disc(cls, side: Any, row: int, col: int) -> Action:
        """Factory for an othello placement."""
        return cls(
            action_type=ActionType.PLACE_DISC,
            payload=ActionPayload(side=side, row=row, col=col),
        )

    @classmethod
    def pass_turn(cls, side: Any) -> Action:
        """Factory for a forced pass."""
        return cls(
            action_type=ActionType.PASS,
            payload=ActionPayload(side=side),
        )

    def describe(self) -> str:
        """Short human-readable form, used in logs and API payloads."""
        p = self.payload
        who = getattr(p.side, "value", p.side)
        if self.action_type == ActionType.PLACE_MARK:
            if p.source is not None:
                return f"{who} moves {p.source} -> {p.cell}"
            return f"{who} places on {p.cell}"
        if self.action_type == ActionType.PLACE_DISC:
            return f"{who} plays ({p.row}, {p.col})"
        return f"{who} passes"


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (the unchanged state on failure: illegal moves are no-ops)
    - Error details (if failed)
    - Human-readable changes (for UI updates)
    """
    success: bool
    new_state: Any | None = None
    error: str | None = None
    error_code: ErrorCode | None = None

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: ErrorCode | None = None,
        state: Any | None = None,
    ) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, new_state=state, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
