"""
Boardchat - Chat assistant with built-in board game opponents.

A small web backend that forwards chat to a language model backend and
hosts two deterministic game engines the user can play against:
- Tic-tac-toe where each side keeps at most three marks (oldest moves on)
- Othello on a 6x6 board

Each engine provides:
- Immutable state and rules
- Legal action generation
- A bot that picks the opponent's move
"""

__version__ = "0.1.0"
