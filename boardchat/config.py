"""
Configuration - Settings loaded from environment variables.

Every knob has a default so the server, CLI and tests run without any
environment set up. The chat backend key is only needed once a chat
message is actually forwarded.
"""

from __future__ import annotations
from dataclasses import dataclass
import os
from typing import Any, Callable


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
    value = os.environ.get(name)
    if value is None:
        return default
    return cast(value) if cast else value


@dataclass(frozen=True)
class Settings:
    # Deployment
    env: str
    log_level: str
    allowed_origins: tuple[str, ...]

    # Chat backend (OpenAI-compatible)
    openai_api_key: str
    openai_base_url: str | None
    default_model: str
    request_timeout_s: float
    temperature: float

    # Games
    opponent_delay_ms: int
    tictactoe_max_half_moves: int
    session_max_age_s: int

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            env=_get("BOARDCHAT_ENV", "development"),
            log_level=_get("BOARDCHAT_LOG_LEVEL", "INFO").upper(),
            allowed_origins=tuple(_get("ALLOWED_ORIGINS", "*").split(",")),
            openai_api_key=_get("OPENAI_API_KEY", ""),
            openai_base_url=_get("OPENAI_BASE_URL", None),
            default_model=_get("BOARDCHAT_DEFAULT_MODEL", "gpt-3.5-turbo"),
            request_timeout_s=_get("BOARDCHAT_REQUEST_TIMEOUT_S", 60.0, cast=float),
            temperature=_get("BOARDCHAT_TEMPERATURE", 0.7, cast=float),
            opponent_delay_ms=_get("BOARDCHAT_OPPONENT_DELAY_MS", 500, cast=int),
            tictactoe_max_half_moves=_get("BOARDCHAT_TICTACTOE_MAX_HALF_MOVES", 60, cast=int),
            session_max_age_s=_get("BOARDCHAT_SESSION_MAX_AGE_S", 3600, cast=int),
        )


SETTINGS = Settings.from_env()
