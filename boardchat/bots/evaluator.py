"""
Heuristic Evaluators - Score board positions for bot decision-making.

Two evaluators, one per game:
- TicTacToeEvaluator: occupancy of strong cells plus open-line counts
- OthelloEvaluator: positional matrix plus a phase-dependent term

Weights live in dataclasses so alternative play styles can be built
without touching the search code.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence

from ..games.tictactoe import CENTER, CORNERS, LINES, Side
from ..games.tictactoe.state import Cell
from ..games.othello import SIZE, ENDGAME_DISCS, Board, Disc, count_discs, find_legal_moves


# =============================================================================
# Tic-Tac-Toe
# =============================================================================

@dataclass
class TicTacToeWeights:
    """
    Weights for the tic-tac-toe heuristic.

    All values are from the evaluating side's point of view.
    """
    win_score: int = 100  # Terminal score before the ply adjustment
    center: int = 3
    corner: int = 2
    two_open: int = 5  # Two own marks and one empty cell
    one_open: int = 1  # One own mark and two empty cells
    threat: int = -5  # Two enemy marks and one empty cell


class TicTacToeEvaluator:
    """Static evaluation of a non-terminal tic-tac-toe board."""

    def __init__(self, weights: TicTacToeWeights | None = None):
        self.weights = weights or TicTacToeWeights()

    def evaluate(self, board: Sequence[Cell], side: Side = Side.OPPONENT) -> int:
        w = self.weights
        enemy = side.other
        score = 0

        if board[CENTER] is side:
            score += w.center
        elif board[CENTER] is enemy:
            score -= w.center

        for corner in CORNERS:
            if board[corner] is side:
                score += w.corner
            elif board[corner] is enemy:
                score -= w.corner

        for line in LINES:
            cells = [board[i] for i in line]
            own = cells.count(side)
            theirs = cells.count(enemy)
            empty = cells.count(None)
            if own == 2 and empty == 1:
                score += w.two_open
            elif own == 1 and empty == 2:
                score += w.one_open
            elif theirs == 2 and empty == 1:
                score += w.threat

        return score

    def terminal_score(self, winner: Side, side: Side, ply: int) -> int:
        """Faster wins and slower losses score better."""
        if winner is side:
            return self.weights.win_score - ply
        return ply - self.weights.win_score


# =============================================================================
# Othello
# =============================================================================

POSITION_VALUES: tuple[tuple[int, ...], ...] = (
    (120, -20, 20, 20, -20, 120),
    (-20, -40, -5, -5, -40, -20),
    (20, -5, 15, 15, -5, 20),
    (20, -5, 15, 15, -5, 20),
    (-20, -40, -5, -5, -40, -20),
    (120, -20, 20, 20, -20, 120),
)


@dataclass
class OthelloWeights:
    """
    Weights for the othello evaluator.

    The endgame threshold switches the phase term from mobility to
    raw disc difference.
    """
    position_values: tuple[tuple[int, ...], ...] = field(default=POSITION_VALUES)
    endgame_discs: int = ENDGAME_DISCS
    endgame_disc_weight: int = 10
    mobility_weight: int = 5
    disc_weight: int = 2
    pass_bonus: int = 30  # Leaving the opponent without a reply


class OthelloEvaluator:
    """Static evaluation of an othello board for one side."""

    def __init__(self, weights: OthelloWeights | None = None):
        self.weights = weights or OthelloWeights()

    def evaluate(self, board: Board, side: Disc) -> int:
        w = self.weights
        enemy = side.other
        score = 0

        for r in range(SIZE):
            for c in range(SIZE):
                square = board[r][c]
                if square is side:
                    score += w.position_values[r][c]
                elif square is enemy:
                    score -= w.position_values[r][c]

        mine = count_discs(board, side)
        theirs = count_discs(board, enemy)
        if mine + theirs >= w.endgame_discs:
            score += w.endgame_disc_weight * (mine - theirs)
        else:
            mobility = len(find_legal_moves(board, side)) - len(find_legal_moves(board, enemy))
            score += w.mobility_weight * mobility
            score += w.disc_weight * (mine - theirs)

        return score


_default_othello = OthelloEvaluator()


def evaluate(board: Board, side: Disc) -> int:
    """Evaluate an othello board for `side` with the default weights."""
    return _default_othello.evaluate(board, side)
