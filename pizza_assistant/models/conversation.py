"""Conversation-related data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class Intent(str, Enum):
    """What the user wants from a single utterance."""

    CHAT = "chat"
    ORDER = "order"
    QUIT = "quit"


@dataclass
class ChatMessage:
    """A single chat turn kept in memory for LLM context."""

    role: Literal["user", "assistant"]
    content: str

    def to_api(self) -> dict:
        return {"role": self.role, "content": self.content}
