"""Intent classification for user utterances."""

from typing import Iterable, Protocol

from ..models import Intent


class IIntentClassifier(Protocol):
    """Maps an utterance to an Intent. Anything unrecognised is CHAT."""

    def classify(self, utterance: str) -> Intent:
        """Classify a single utterance."""
        ...


class KeywordIntentClassifier:
    """Case-insensitive substring matcher. Quit phrases win over order phrases."""

    def __init__(self, quit_keywords: Iterable[str], order_phrases: Iterable[str]):
        self._quit_keywords = tuple(k.lower() for k in quit_keywords if k.strip())
        self._order_phrases = tuple(p.lower() for p in order_phrases if p.strip())

    def classify(self, utterance: str) -> Intent:
        text = utterance.lower()
        if any(keyword in text for keyword in self._quit_keywords):
            return Intent.QUIT
        if any(phrase in text for phrase in self._order_phrases):
            return Intent.ORDER
        return Intent.CHAT
