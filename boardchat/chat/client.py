"""
Chat Client - Facade over an OpenAI-compatible chat completion API.

The rest of the code passes role-tagged messages and a model id and gets
a reply string back. Backend failures never propagate: they are logged
and turned into a user-safe fallback reply.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import logging

from openai import OpenAI, OpenAIError

from .prompts import ChatPrompts, MODEL_OPTIONS
from ..config import SETTINGS, Settings

log = logging.getLogger(__name__)


@dataclass
class ChatReply:
    """Reply text plus how it was produced."""
    reply: str
    model: str
    fallback: bool = False


@dataclass
class ChatClient:
    """
    Chat backend client.

    Usage:
        client = ChatClient()
        result = client.reply([{"role": "user", "content": "hi"}], model="gpt-4o")
        print(result.reply)
    """
    settings: Settings = field(default_factory=lambda: SETTINGS)
    client: Any = None  # OpenAI-compatible client, built on first use

    def resolve_model(self, model: str | None) -> str:
        """Unknown or missing model ids fall back to the configured default."""
        if model and model in MODEL_OPTIONS:
            return model
        return self.settings.default_model

    def reply(self, messages: list[dict[str, str]], model: str | None = None) -> ChatReply:
        model = self.resolve_model(model)
        conversation = [{"role": "system", "content": ChatPrompts.system()}, *messages]

        try:
            rsp = self._get_client().chat.completions.create(
                model=model,
                messages=conversation,
                temperature=self.settings.temperature,
                timeout=self.settings.request_timeout_s,
            )
        except OpenAIError:
            log.exception("Chat request to %s failed", model)
            return ChatReply(reply=ChatPrompts.fallback(), model=model, fallback=True)

        text = _extract_text(rsp)
        if not text:
            log.warning("Empty reply from %s", model)
            return ChatReply(reply=ChatPrompts.fallback(), model=model, fallback=True)
        return ChatReply(reply=text.strip(), model=model)

    def _get_client(self):
        if self.client is None:
            self.client = OpenAI(
                api_key=self.settings.openai_api_key or None,
                base_url=self.settings.openai_base_url,
            )
        return self.client


def _extract_text(rsp) -> str:
    choices = getattr(rsp, "choices", None)
    if not choices:
        return ""
    content = getattr(choices[0].message, "content", None)
    return content if isinstance(content, str) else ""
