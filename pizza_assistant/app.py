"""Application bootstrap and lifecycle management."""

from typing import Protocol

from .config import AssistantConfig
from .dialogue import (
    ConversationClient,
    ConversationHistory,
    DialogueLoop,
    KeywordIntentClassifier,
    OrderDialogue,
)
from .gateway import OrderGatewayClient
from .llm import ILLMProvider, LLMProvider
from .logging_config import get_logger
from .speech import (
    ConsoleSpeechInput,
    ConsoleSpeechOutput,
    GTTSSpeechOutput,
    ISpeechInput,
    ISpeechOutput,
    MicrophoneSpeechInput,
)

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def run(self) -> None:
        """Run the dialogue loop until the user quits."""
        ...

    async def stop(self) -> None:
        """Release external clients."""
        ...


class Application:
    """Wires the voice assistant together from an AssistantConfig.

    Components may be injected (tests, text mode); anything not injected is
    built from the config in start().
    """

    def __init__(
        self,
        config: AssistantConfig,
        text_mode: bool = False,
        speech_input: ISpeechInput | None = None,
        speech_output: ISpeechOutput | None = None,
        llm_provider: ILLMProvider | None = None,
        gateway: OrderGatewayClient | None = None,
    ):
        self._config = config
        self._text_mode = text_mode

        self._speech_input = speech_input
        self._speech_output = speech_output
        self._llm = llm_provider
        self._gateway = gateway
        self._loop: DialogueLoop | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")
        config = self._config

        # 1. Speech adapters (no dependencies)
        if self._speech_input is None:
            if self._text_mode:
                quit_text = config.quit_keywords[0] if config.quit_keywords else ""
                self._speech_input = ConsoleSpeechInput(eof_text=quit_text)
            else:
                self._speech_input = MicrophoneSpeechInput(config)
        if self._speech_output is None:
            self._speech_output = (
                ConsoleSpeechOutput() if self._text_mode else GTTSSpeechOutput(config)
            )
        logger.info("Speech adapters initialized (text_mode=%s)", self._text_mode)

        # 2. External clients
        if self._llm is None:
            self._llm = LLMProvider(config)
        if self._gateway is None:
            self._gateway = OrderGatewayClient(config)
        logger.info("Ordering gateway at %s", config.ordering_service_url)

        # 3. Dialogue (depends on everything above)
        conversation = ConversationClient(
            llm_provider=self._llm,
            history=ConversationHistory(config.history_messages),
            system_prompt=config.system_prompt,
            fallback_reply=config.fallback_reply,
        )
        order_dialogue = OrderDialogue(
            speech_input=self._speech_input,
            speech_output=self._speech_output,
            gateway=self._gateway,
            slot_retries=config.slot_retries,
            cancel_keyword=config.cancel_keyword,
        )
        self._loop = DialogueLoop(
            speech_input=self._speech_input,
            speech_output=self._speech_output,
            classifier=KeywordIntentClassifier(config.quit_keywords, config.order_phrases),
            conversation=conversation,
            order_dialogue=order_dialogue,
            greeting=config.greeting,
        )
        logger.info("All components initialized successfully")

    async def run(self) -> None:
        await self.dialogue_loop.run()

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._gateway:
            await self._gateway.aclose()
        if self._llm and hasattr(self._llm, "aclose"):
            await self._llm.aclose()
        self._loop = None
        logger.info("Application stopped")

    @property
    def dialogue_loop(self) -> DialogueLoop:
        """Get dialogue loop instance."""
        if not self._loop:
            raise RuntimeError("Application not started")
        return self._loop
