"""The top-level conversational loop."""

from ..logging_config import get_logger
from ..models import Intent
from ..speech import ISpeechInput, ISpeechOutput
from .conversation import ConversationClient
from .intent import IIntentClassifier
from .ordering import OrderDialogue

logger = get_logger(__name__)


class DialogueLoop:
    """Listens, classifies, and dispatches turns until the user quits.

    Turns are strictly sequential: every external call is awaited before the
    next one starts.
    """

    def __init__(
        self,
        speech_input: ISpeechInput,
        speech_output: ISpeechOutput,
        classifier: IIntentClassifier,
        conversation: ConversationClient,
        order_dialogue: OrderDialogue,
        greeting: str | None = None,
    ):
        self._input = speech_input
        self._output = speech_output
        self._classifier = classifier
        self._conversation = conversation
        self._order_dialogue = order_dialogue
        self._greeting = greeting

    async def run(self) -> None:
        """Run turns until a quit phrase is heard."""
        logger.info("Dialogue loop started")
        if self._greeting:
            await self._output.speak(self._greeting)

        turns = 0
        while await self.run_turn():
            turns += 1

        logger.info("Dialogue loop finished after %d turns", turns)

    async def run_turn(self) -> bool:
        """Handle one utterance. Returns False when the loop should stop."""
        utterance = (await self._input.listen()).strip()
        if not utterance:
            return True

        intent = self._classifier.classify(utterance)
        logger.info("Intent %s for: %s", intent.value, utterance[:100])

        if intent is Intent.QUIT:
            return False

        if intent is Intent.ORDER:
            outcome = await self._order_dialogue.run()
            logger.info("Order dialogue ended: %s", outcome.value)
            return True

        reply = await self._conversation.reply(utterance)
        await self._output.speak(reply)
        return True
