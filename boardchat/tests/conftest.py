"""
Pytest fixtures for Boardchat tests.
"""

import random
import time
from types import SimpleNamespace

import pytest

from ..api.service import APIService
from ..bots import BotDecision, BotPolicy
from ..chat import ChatClient
from ..engine_core import Action
from ..games.othello import Disc, OthelloState
from ..games.tictactoe import Side, TicTacToeState
from ..session import SessionManager


def make_tictactoe(
    player: tuple[int, ...] = (),
    opponent: tuple[int, ...] = (),
    turn: Side = Side.PLAYER,
    half_moves: int = 0,
    max_half_moves: int = 60,
) -> TicTacToeState:
    """Build a position from each side's marks, oldest first."""
    board = [None] * 9
    for cell in player:
        board[cell] = Side.PLAYER
    for cell in opponent:
        board[cell] = Side.OPPONENT
    return TicTacToeState(
        board=tuple(board),
        turn=turn,
        player_marks=player,
        opponent_marks=opponent,
        half_moves=half_moves,
        max_half_moves=max_half_moves,
    )


def make_othello(
    discs: dict[tuple[int, int], Disc],
    current_player: Disc = Disc.BLACK,
) -> OthelloState:
    """Build a position from a {square: disc} mapping on an otherwise empty board."""
    rows = [[None] * 6 for _ in range(6)]
    for (row, col), disc in discs.items():
        rows[row][col] = disc
    return OthelloState(
        board=tuple(tuple(r) for r in rows),
        current_player=current_player,
    )


CENTER_CROSS = {
    (2, 2): Disc.WHITE,
    (2, 3): Disc.BLACK,
    (3, 2): Disc.BLACK,
    (3, 3): Disc.WHITE,
}


class FakeCompletions:
    """Stands in for `client.chat.completions` of the OpenAI SDK."""

    def __init__(self, reply: str | None = "Probably.", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(role="assistant", content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_fake_openai(reply: str | None = "Probably.", error: Exception | None = None):
    completions = FakeCompletions(reply=reply, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def rng() -> random.Random:
    """Seeded randomness for openings and fallbacks."""
    return random.Random(7)


@pytest.fixture
def fresh_tictactoe(rng) -> TicTacToeState:
    """A new game with the opponent's opening mark placed."""
    return TicTacToeState.new_game(rng=rng)


@pytest.fixture
def fresh_othello() -> OthelloState:
    """A new 6x6 othello game."""
    return OthelloState.new_game()


@pytest.fixture
def fake_openai():
    """OpenAI-shaped client returning a fixed reply."""
    return make_fake_openai()


@pytest.fixture
def chat_client(fake_openai) -> ChatClient:
    return ChatClient(client=fake_openai)


@pytest.fixture
def session_manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def service(chat_client) -> APIService:
    """API service with a fake chat backend and no opponent delay."""
    return APIService(chat_client=chat_client, opponent_delay_ms=0)


class SlowBot(BotPolicy):
    """Delegates to another bot after a pause, widening the search window."""

    def __init__(self, inner: BotPolicy, delay_s: float = 0.2):
        self.inner = inner
        self.delay_s = delay_s

    def select_action(self, state, legal_actions):
        time.sleep(self.delay_s)
        return self.inner.select_action(state, legal_actions)


class CornerGrabBot(BotPolicy):
    """Always claims square (0, 0), legal or not."""

    def select_action(self, state, legal_actions):
        return BotDecision(action=Action.place_disc(state.current_player, 0, 0))
