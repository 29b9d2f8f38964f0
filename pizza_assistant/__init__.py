"""Voice-driven pizza ordering assistant."""

from .app import Application, IApplication
from .config import AssistantConfig, ServiceConfig
from .dialogue import (
    ConversationClient,
    ConversationHistory,
    DialogueLoop,
    IIntentClassifier,
    KeywordIntentClassifier,
    OrderDialogue,
)
from .gateway import IOrderGateway, OrderGatewayClient
from .llm import ILLMProvider, LLMProvider
from .models import (
    ChatMessage,
    Intent,
    OrderOutcome,
    OrderRequest,
    OrderResult,
    StoreLookupResult,
)
from .ordering_service import create_ordering_app
from .speech import (
    ConsoleSpeechInput,
    ConsoleSpeechOutput,
    GTTSSpeechOutput,
    ISpeechInput,
    ISpeechOutput,
    MicrophoneSpeechInput,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    "AssistantConfig",
    "ServiceConfig",
    # Models
    "Intent",
    "ChatMessage",
    "OrderRequest",
    "OrderResult",
    "StoreLookupResult",
    "OrderOutcome",
    # Components
    "ILLMProvider",
    "LLMProvider",
    "ISpeechInput",
    "ISpeechOutput",
    "MicrophoneSpeechInput",
    "GTTSSpeechOutput",
    "ConsoleSpeechInput",
    "ConsoleSpeechOutput",
    "IOrderGateway",
    "OrderGatewayClient",
    "IIntentClassifier",
    "KeywordIntentClassifier",
    "ConversationClient",
    "ConversationHistory",
    "OrderDialogue",
    "DialogueLoop",
    "create_ordering_app",
]
