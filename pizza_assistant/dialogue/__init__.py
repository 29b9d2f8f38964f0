"""Dialogue module."""

from .conversation import ConversationClient, ConversationHistory
from .intent import IIntentClassifier, KeywordIntentClassifier
from .loop import DialogueLoop
from .ordering import OrderDialogue

__all__ = [
    "DialogueLoop",
    "OrderDialogue",
    "ConversationClient",
    "ConversationHistory",
    "IIntentClassifier",
    "KeywordIntentClassifier",
]
