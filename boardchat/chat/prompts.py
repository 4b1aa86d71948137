"""
Chat Prompts - System prompt, canned replies and the model catalogue.

The persona is calm and terse: short sentences, hedged statements,
little visible emotion.
"""

from dataclasses import dataclass


@dataclass
class ChatPrompts:
    """
    Prompts and canned replies for the chat backend.

    Canned replies are returned without calling the backend.
    """

    @staticmethod
    def system() -> str:
        """Persona prompt prepended to every conversation."""
        return """
You are an assistant with a calm, laid-back tone.
Reply in short sentences and avoid sounding too certain.
- Examples: "I like it." / "Probably." / "Feels tricky." / "That's how I see it."
- Don't show too much emotion.
- A little pause in the rhythm of the reply is fine.
Answer in the language the user writes in.
"""

    @staticmethod
    def greeting() -> str:
        return "Hey. Anything you want to ask?"

    @staticmethod
    def fallback() -> str:
        """User-safe reply when the backend fails."""
        return "Sorry, something went wrong. Give it a moment and try again."

    @staticmethod
    def game_started(game_name: str) -> str:
        return f"Alright, {game_name}. Your move."

    @staticmethod
    def game_ended(game_name: str) -> str:
        return f"Done with {game_name}. Back to talking."


# Models the UI may select, id -> display label
MODEL_OPTIONS: dict[str, str] = {
    "gpt-3.5-turbo": "GPT-3.5 Turbo",
    "gpt-4o-mini": "GPT-4o mini",
    "gpt-4o": "GPT-4o",
}
