"""
Tic-Tac-Toe Rules - Pure functions over TicTacToeState.

Illegal placements are no-ops: apply_placement returns the state it was
given. Callers check is_legal_placement first when they need to know.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .state import (
    BOARD_SIZE,
    LINES,
    MAX_MARKS,
    Cell,
    Outcome,
    Side,
    TicTacToeState,
)


@dataclass(frozen=True)
class Move:
    """
    A placement on `cell`.

    With `source` set, the move is a relocation: the mover's mark on
    `source` is lifted instead of its oldest one. Only valid once the
    mover holds MAX_MARKS marks.
    """
    cell: int
    source: int | None = None

    @property
    def is_relocation(self) -> bool:
        return self.source is not None


def check_winner(board: Sequence[Cell]) -> Side | None:
    """Return the side holding a full line, if any."""
    for a, b, c in LINES:
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return mark
    return None


def is_legal_placement(
    state: TicTacToeState,
    cell: int,
    side: Side = Side.PLAYER,
) -> bool:
    """A placement is legal on an empty in-range cell, on side's turn, before game end."""
    if state.game_over:
        return False
    if state.turn is not side:
        return False
    if not 0 <= cell < BOARD_SIZE:
        return False
    return state.board[cell] is None


def is_legal_relocation(
    state: TicTacToeState,
    source: int,
    cell: int,
    side: Side,
) -> bool:
    """Relocations need a full set of marks and one of them on `source`."""
    if not is_legal_placement(state, cell, side):
        return False
    marks = state.marks_of(side)
    return len(marks) >= MAX_MARKS and source in marks


def apply_placement(
    state: TicTacToeState,
    cell: int,
    side: Side,
    source: int | None = None,
) -> TicTacToeState:
    """
    Place a mark for `side` and return the resulting state.

    At the mark cap the oldest mark (or the mark on `source`) is lifted
    first, so the side never holds more than MAX_MARKS marks.
    """
    if source is None:
        if not is_legal_placement(state, cell, side):
            return state
    elif not is_legal_relocation(state, source, cell, side):
        return state

    board = list(state.board)
    marks = list(state.marks_of(side))

    if len(marks) >= MAX_MARKS:
        lifted = marks[0] if source is None else source
        marks.remove(lifted)
        board[lifted] = None

    board[cell] = side
    marks.append(cell)

    winner = check_winner(board)
    half_moves = state.half_moves + 1
    outcome = None
    if winner is not None:
        outcome = Outcome.for_side(winner)
    elif half_moves >= state.max_half_moves:
        outcome = Outcome.DRAW

    changes = {"player_marks" if side is Side.PLAYER else "opponent_marks": tuple(marks)}
    return state._copy_with(
        board=tuple(board),
        turn=side.other,
        winner=outcome,
        half_moves=half_moves,
        **changes,
    )


def apply_move(state: TicTacToeState, move: Move, side: Side) -> TicTacToeState:
    """Apply a Move (placement or relocation)."""
    return apply_placement(state, move.cell, side, source=move.source)


def generate_moves(state: TicTacToeState, side: Side) -> list[Move]:
    """
    All moves available to `side`.

    Below the cap these are plain placements. At the cap each empty cell
    also gets one relocation per non-oldest mark; lifting the oldest mark
    is what a plain placement already does.
    """
    if state.game_over or state.turn is not side:
        return []

    empty = state.empty_cells()
    moves = [Move(cell) for cell in empty]

    marks = state.marks_of(side)
    if len(marks) >= MAX_MARKS:
        for source in marks[1:]:
            moves.extend(Move(cell, source) for cell in empty)

    return moves


def winning_moves(state: TicTacToeState, side: Side) -> list[Move]:
    """Moves that win immediately for `side`, as if it were side's turn."""
    probe = state if state.turn is side else state._copy_with(turn=side)
    return [
        move for move in generate_moves(probe, side)
        if apply_move(probe, move, side).winner is Outcome.for_side(side)
    ]
