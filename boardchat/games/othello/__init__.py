"""
Othello on a 6x6 board.

Black (the human) moves first from the standard four-disc centre cross.
"""

from .state import (
    OthelloState,
    Disc,
    Board,
    SIZE,
    CORNERS,
    ENDGAME_DISCS,
    initial_board,
    count_discs,
)
from .rules import (
    find_legal_moves,
    compute_flips,
    is_legal_move,
    place_disc,
    apply_move,
    pass_turn,
)

__all__ = [
    "OthelloState",
    "Disc",
    "Board",
    "SIZE",
    "CORNERS",
    "ENDGAME_DISCS",
    "initial_board",
    "count_discs",
    "find_legal_moves",
    "compute_flips",
    "is_legal_move",
    "place_disc",
    "apply_move",
    "pass_turn",
]
