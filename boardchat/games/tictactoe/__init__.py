"""
Tic-Tac-Toe with a three-mark carry limit.

Each side may hold three marks; placing a fourth lifts that side's
oldest mark.
"""

from .state import (
    TicTacToeState,
    Side,
    Outcome,
    MAX_MARKS,
    LINES,
    CENTER,
    CORNERS,
    OPENING_CELLS,
)
from .rules import (
    Move,
    check_winner,
    is_legal_placement,
    is_legal_relocation,
    apply_placement,
    apply_move,
    generate_moves,
    winning_moves,
)

__all__ = [
    "TicTacToeState",
    "Side",
    "Outcome",
    "MAX_MARKS",
    "LINES",
    "CENTER",
    "CORNERS",
    "OPENING_CELLS",
    "Move",
    "check_winner",
    "is_legal_placement",
    "is_legal_relocation",
    "apply_placement",
    "apply_move",
    "generate_moves",
    "winning_moves",
]
