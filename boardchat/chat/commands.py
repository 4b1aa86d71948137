"""
Game Commands - Lexical routing of chat input to game mode.

A message that is exactly one of the trigger words (ignoring case and
surrounding whitespace) toggles a game instead of reaching the chat
backend. Anything else is ordinary chat.
"""

from __future__ import annotations

from ..games import GameKind


GAME_TRIGGERS: dict[str, GameKind] = {
    "マルバツ": GameKind.TICTACTOE,
    "まるばつ": GameKind.TICTACTOE,
    "○×": GameKind.TICTACTOE,
    "tic tac toe": GameKind.TICTACTOE,
    "tic-tac-toe": GameKind.TICTACTOE,
    "tictactoe": GameKind.TICTACTOE,
    "オセロ": GameKind.OTHELLO,
    "リバーシ": GameKind.OTHELLO,
    "othello": GameKind.OTHELLO,
    "reversi": GameKind.OTHELLO,
}

GAME_NAMES: dict[GameKind, str] = {
    GameKind.TICTACTOE: "tic-tac-toe",
    GameKind.OTHELLO: "othello",
}


def detect_game_command(text: str) -> GameKind | None:
    """Return the game a message toggles, or None for ordinary chat."""
    return GAME_TRIGGERS.get(text.strip().casefold())
