"""Slot-filling sub-dialogue that collects and submits a pizza order."""

import re

from ..gateway import IOrderGateway
from ..logging_config import get_logger
from ..models import OrderOutcome, OrderRequest
from ..speech import ISpeechInput, ISpeechOutput

logger = get_logger(__name__)

# Slot name on OrderRequest -> spoken prompt, in asking order.
SLOT_PROMPTS = (
    ("delivery_address", "Sure! What address should we deliver to?"),
    ("item_description", "What kind of pizza would you like?"),
    ("size", "And what size?"),
)

NO_STORE_MESSAGE = "Sorry, no nearby store was found for that address, so I couldn't place the order."
ORDER_FAILED_MESSAGE = "Sorry, something went wrong and the order could not be placed."
ABANDONED_MESSAGE = "I didn't catch that, so I've dropped the order. Say 'order pizza' to start again."
CANCELLED_MESSAGE = "Okay, I've cancelled the order."
REPROMPT_PREFIX = "Sorry, I didn't hear you. "

_NON_WORD = re.compile(r"[^\w]+")


def _normalize(text: str) -> str:
    return _NON_WORD.sub("", text).lower()


def describe_item(item_description: str) -> str:
    """Spoken name for the ordered item, e.g. "pepperoni" -> "pepperoni pizza"."""
    item = item_description.strip()
    if item.lower().endswith("pizza"):
        return item
    return f"{item} pizza"


class OrderDialogue:
    """Fills an OrderRequest over three prompts, then looks up a store and orders.

    An empty answer is asked again up to ``slot_retries`` more times before
    the order is abandoned. An answer that is just ``cancel_keyword`` cancels;
    the keyword inside a longer answer ("1 Cancel Rd") is kept as the value.
    The request is discarded whatever the outcome.
    """

    def __init__(
        self,
        speech_input: ISpeechInput,
        speech_output: ISpeechOutput,
        gateway: IOrderGateway,
        slot_retries: int = 1,
        cancel_keyword: str | None = "cancel",
    ):
        self._input = speech_input
        self._output = speech_output
        self._gateway = gateway
        self._slot_retries = max(0, slot_retries)
        self._cancel_keyword = _normalize(cancel_keyword) if cancel_keyword else None

    async def run(self) -> OrderOutcome:
        """Run one complete ordering exchange and report how it ended."""
        request = OrderRequest()

        for slot, prompt in SLOT_PROMPTS:
            answer = await self._ask(prompt)
            if answer is None:
                logger.info("Order abandoned at %s", slot)
                await self._output.speak(ABANDONED_MESSAGE)
                return OrderOutcome.ABANDONED
            if self._is_cancel(answer):
                logger.info("Order cancelled at %s", slot)
                await self._output.speak(CANCELLED_MESSAGE)
                return OrderOutcome.CANCELLED
            setattr(request, slot, answer)

        return await self._submit(request)

    async def _ask(self, prompt: str) -> str | None:
        """Speak prompt and listen; None when every attempt came back empty."""
        for attempt in range(self._slot_retries + 1):
            await self._output.speak(prompt if attempt == 0 else REPROMPT_PREFIX + prompt)
            answer = (await self._input.listen()).strip()
            if answer:
                return answer
        return None

    def _is_cancel(self, answer: str) -> bool:
        return bool(self._cancel_keyword) and _normalize(answer) == self._cancel_keyword

    async def _submit(self, request: OrderRequest) -> OrderOutcome:
        if not request.is_complete:
            logger.warning("Order incomplete, missing %s", ", ".join(request.missing_fields()))
            await self._output.speak(ABANDONED_MESSAGE)
            return OrderOutcome.ABANDONED

        logger.info(
            "Order collected",
            extra={
                "context": {
                    "address": request.delivery_address,
                    "item": request.item_description,
                    "size": request.size,
                }
            },
        )

        lookup = await self._gateway.lookup_store(request.delivery_address)
        if not lookup.success:
            logger.info("Store lookup failed: %s", lookup.error_message)
            await self._output.speak(NO_STORE_MESSAGE)
            return OrderOutcome.NO_STORE

        result = await self._gateway.place_order(
            request.delivery_address, request.item_description, request.size
        )
        if not result.success:
            logger.warning("Order placement failed: %s", result.error_message)
            await self._output.speak(ORDER_FAILED_MESSAGE)
            return OrderOutcome.FAILED

        await self._output.speak(
            f"Your {request.size} {describe_item(request.item_description)} is on its way to "
            f"{request.delivery_address}. Your order number is {result.order_id}."
        )
        return OrderOutcome.PLACED
