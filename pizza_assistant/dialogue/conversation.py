"""Chat turns against the LLM with a bounded in-memory history."""

from ..llm import ILLMProvider
from ..logging_config import get_logger
from ..models import ChatMessage

logger = get_logger(__name__)


class ConversationHistory:
    """Most recent chat messages, oldest first, for LLM context."""

    def __init__(self, max_messages: int = 10):
        self._max_messages = max_messages
        self._messages: list[ChatMessage] = []

    def add_exchange(self, user_text: str, assistant_text: str) -> None:
        """Record a completed user/assistant exchange, dropping the oldest pairs."""
        self._messages.append(ChatMessage(role="user", content=user_text))
        self._messages.append(ChatMessage(role="assistant", content=assistant_text))

        overflow = len(self._messages) - self._max_messages
        if overflow > 0:
            # Trim whole exchanges so context always starts with a user turn
            self._messages = self._messages[overflow + overflow % 2:]

    def get_all(self) -> list[ChatMessage]:
        return self._messages.copy()

    def to_api(self) -> list[dict]:
        return [msg.to_api() for msg in self._messages]

    def clear(self) -> None:
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)


class ConversationClient:
    """One chat turn: utterance in, reply text out. Never raises."""

    def __init__(
        self,
        llm_provider: ILLMProvider,
        history: ConversationHistory,
        system_prompt: str | None = None,
        fallback_reply: str = "Sorry, something went wrong.",
    ):
        self._llm = llm_provider
        self._history = history
        self._system_prompt = system_prompt
        self._fallback_reply = fallback_reply

    async def reply(self, text: str) -> str:
        """Send text with recent history to the LLM and return its reply."""
        messages = self._history.to_api() + [{"role": "user", "content": text}]

        try:
            response_text = await self._llm.complete(messages=messages, system=self._system_prompt)
        except Exception as e:
            logger.error(f"LLM error: {e}", exc_info=True)
            return self._fallback_reply

        if not response_text:
            logger.warning("LLM returned an empty reply")
            return self._fallback_reply

        logger.debug(f"Generated response: {response_text[:50]}...")
        self._history.add_exchange(text, response_text)
        return response_text
