"""
Tic-Tac-Toe State - Board, turn and per-side mark queues.

Variant rules:
- Each side holds at most MAX_MARKS live marks
- Placing a new mark at the cap lifts that side's oldest mark first
- The opponent opens with one mark on the center or a corner

The state is immutable-friendly: every transition returns a new state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import random


BOARD_SIZE = 9
MAX_MARKS = 3
DEFAULT_MAX_HALF_MOVES = 60

OPENING_CELLS = (0, 2, 4, 6, 8)
CENTER = 4
CORNERS = (0, 2, 6, 8)

LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),  # diagonals
)


class Side(Enum):
    """The two sides. The human plays PLAYER."""
    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER

    @property
    def symbol(self) -> str:
        return "O" if self is Side.PLAYER else "X"


class Outcome(Enum):
    """Terminal result of a game."""
    PLAYER = "player"
    OPPONENT = "opponent"
    DRAW = "draw"

    @classmethod
    def for_side(cls, side: Side) -> Outcome:
        return cls.PLAYER if side is Side.PLAYER else cls.OPPONENT


Cell = Side | None


@dataclass(frozen=True)
class TicTacToeState:
    """
    Complete tic-tac-toe position.

    `player_marks` / `opponent_marks` are FIFO queues of cell indices,
    oldest first. They are the source of truth for eviction order.
    """
    board: tuple[Cell, ...] = (None,) * BOARD_SIZE
    turn: Side = Side.PLAYER
    player_marks: tuple[int, ...] = ()
    opponent_marks: tuple[int, ...] = ()
    winner: Outcome | None = None
    half_moves: int = 0
    max_half_moves: int = DEFAULT_MAX_HALF_MOVES

    # History (for replay, logging)
    action_history: list[Any] = field(default_factory=list, compare=False)

    @classmethod
    def new_game(
        cls,
        rng: random.Random | None = None,
        max_half_moves: int = DEFAULT_MAX_HALF_MOVES,
    ) -> TicTacToeState:
        """Create a game with the opponent's opening mark already placed."""
        rng = rng or random.Random()
        opening = rng.choice(OPENING_CELLS)
        board = [None] * BOARD_SIZE
        board[opening] = Side.OPPONENT
        return cls(
            board=tuple(board),
            turn=Side.PLAYER,
            opponent_marks=(opening,),
            max_half_moves=max_half_moves,
        )

    @property
    def game_over(self) -> bool:
        return self.winner is not None

    @property
    def player_mark_count(self) -> int:
        return len(self.player_marks)

    @property
    def opponent_mark_count(self) -> int:
        return len(self.opponent_marks)

    def marks_of(self, side: Side) -> tuple[int, ...]:
        """FIFO queue of a side's live marks."""
        return self.player_marks if side is Side.PLAYER else self.opponent_marks

    def empty_cells(self) -> list[int]:
        return [i for i, cell in enumerate(self.board) if cell is None]

    def _copy_with(self, **kwargs) -> TicTacToeState:
        """Create a copy with some fields replaced."""
        return TicTacToeState(
            board=kwargs.get("board", self.board),
            turn=kwargs.get("turn", self.turn),
            player_marks=kwargs.get("player_marks", self.player_marks),
            opponent_marks=kwargs.get("opponent_marks", self.opponent_marks),
            winner=kwargs.get("winner", self.winner),
            half_moves=kwargs.get("half_moves", self.half_moves),
            max_half_moves=kwargs.get("max_half_moves", self.max_half_moves),
            action_history=kwargs.get("action_history", list(self.action_history)),
        )

    def render(self) -> str:
        """Plain-text board, one row per line."""
        rows = []
        for r in range(3):
            cells = self.board[r * 3:r * 3 + 3]
            rows.append(" ".join(c.symbol if c else "." for c in cells))
        return "\n".join(rows)
