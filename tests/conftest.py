"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pizza_assistant.config import AssistantConfig  # noqa: E402
from pizza_assistant.models import OrderResult, StoreLookupResult  # noqa: E402


@pytest.fixture
def config(tmp_path):
    """Assistant config with test-safe values."""
    return AssistantConfig(
        anthropic_api_key="test_key",
        ordering_service_url="http://ordering.test",
        greeting=None,
        audio_path=tmp_path / "reply.mp3",
        audio_playback=False,
    )


@pytest.fixture
def mock_llm():
    """Create mock LLM provider."""
    llm = Mock()
    llm.complete = AsyncMock(return_value="Test response")
    llm.aclose = AsyncMock()
    return llm


@pytest.fixture
def speech_output():
    """Speech output that records what was spoken."""
    output = Mock()
    output.speak = AsyncMock()
    return output


@pytest.fixture
def make_speech_input():
    """Factory for speech input that hears the given utterances in order."""

    def _make(*utterances: str):
        speech_input = Mock()
        speech_input.listen = AsyncMock(side_effect=list(utterances))
        return speech_input

    return _make


@pytest.fixture
def gateway():
    """Order gateway whose store lookup and order placement both succeed."""
    gw = Mock()
    gw.lookup_store = AsyncMock(return_value=StoreLookupResult(success=True, store_id="12345"))
    gw.place_order = AsyncMock(
        return_value=OrderResult(success=True, order_id="67890", message="Order placed")
    )
    gw.aclose = AsyncMock()
    return gw


@pytest.fixture
def spoken(speech_output):
    """Callable returning everything passed to speak(), in order."""

    def _spoken() -> list[str]:
        return [c.args[0] for c in speech_output.speak.await_args_list]

    return _spoken
