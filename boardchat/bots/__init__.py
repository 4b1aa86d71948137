"""
Bots module - Scripted opponents for the hosted games.

Provides:
- BotPolicy: Interface for bot decision-making
- TicTacToeBot: Alpha-beta minimax for three-mark tic-tac-toe
- OthelloBot: Corner-first one-ply lookahead for 6x6 othello
- Evaluators: Static position scoring for both games
"""

from .policy import BotPolicy, BotDecision
from .evaluator import (
    TicTacToeEvaluator,
    TicTacToeWeights,
    OthelloEvaluator,
    OthelloWeights,
    POSITION_VALUES,
    evaluate,
)
from .tictactoe_bot import TicTacToeBot, MoveChoice
from .othello_bot import OthelloBot

__all__ = [
    "BotPolicy",
    "BotDecision",
    "TicTacToeEvaluator",
    "TicTacToeWeights",
    "OthelloEvaluator",
    "OthelloWeights",
    "POSITION_VALUES",
    "evaluate",
    "TicTacToeBot",
    "MoveChoice",
    "OthelloBot",
]
