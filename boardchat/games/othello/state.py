"""
Othello State - 6x6 board, side to move and pass/termination flags.

Disc counts are never stored; they are always recomputed from the board.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


SIZE = 6
ENDGAME_DISCS = 30

CORNERS: tuple[tuple[int, int], ...] = (
    (0, 0), (0, SIZE - 1), (SIZE - 1, 0), (SIZE - 1, SIZE - 1),
)

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class Disc(Enum):
    """Disc colours. Black is the human, White the engine."""
    BLACK = "black"
    WHITE = "white"

    @property
    def other(self) -> Disc:
        return Disc.WHITE if self is Disc.BLACK else Disc.BLACK

    @property
    def symbol(self) -> str:
        return "B" if self is Disc.BLACK else "W"


Square = Disc | None
Board = tuple[tuple[Square, ...], ...]


def initial_board() -> Board:
    """Empty board with the four-disc centre cross."""
    rows = [[None] * SIZE for _ in range(SIZE)]
    mid = SIZE // 2
    rows[mid - 1][mid - 1] = Disc.WHITE
    rows[mid - 1][mid] = Disc.BLACK
    rows[mid][mid - 1] = Disc.BLACK
    rows[mid][mid] = Disc.WHITE
    return tuple(tuple(row) for row in rows)


def count_discs(board: Board, side: Disc) -> int:
    return sum(1 for row in board for square in row if square is side)


@dataclass(frozen=True)
class OthelloState:
    """
    Complete Othello position.

    `skip_turn` is set when the side that should have moved had no legal
    move and the turn stayed with `current_player`.
    """
    board: Board = field(default_factory=initial_board)
    current_player: Disc = Disc.BLACK
    game_over: bool = False
    skip_turn: bool = False
    last_move: tuple[int, int] | None = None

    # History (for replay, logging)
    action_history: list[Any] = field(default_factory=list, compare=False)

    @classmethod
    def new_game(cls) -> OthelloState:
        return cls()

    @property
    def black_count(self) -> int:
        return count_discs(self.board, Disc.BLACK)

    @property
    def white_count(self) -> int:
        return count_discs(self.board, Disc.WHITE)

    @property
    def winner(self) -> Disc | None:
        """Side with more discs once the game is over; None while playing or on a tie."""
        if not self.game_over:
            return None
        black, white = self.black_count, self.white_count
        if black == white:
            return None
        return Disc.BLACK if black > white else Disc.WHITE

    def at(self, row: int, col: int) -> Square:
        return self.board[row][col]

    def _copy_with(self, **kwargs) -> OthelloState:
        """Create a copy with some fields replaced."""
        return OthelloState(
            board=kwargs.get("board", self.board),
            current_player=kwargs.get("current_player", self.current_player),
            game_over=kwargs.get("game_over", self.game_over),
            skip_turn=kwargs.get("skip_turn", self.skip_turn),
            last_move=kwargs.get("last_move", self.last_move),
            action_history=kwargs.get("action_history", list(self.action_history)),
        )

    def render(self) -> str:
        """Plain-text board with row/column indices."""
        lines = ["  " + " ".join(str(c) for c in range(SIZE))]
        for r, row in enumerate(self.board):
            lines.append(f"{r} " + " ".join(sq.symbol if sq else "." for sq in row))
        return "\n".join(lines)
