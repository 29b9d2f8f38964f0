"""Project-level configuration and path helpers."""

import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
LOGS_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
DEFAULT_AUDIO_PATH = Path(tempfile.gettempdir()) / "pizza_assistant_reply.mp3"

DEFAULT_SYSTEM_PROMPT = (
    "You are a friendly voice assistant for a pizza delivery service. "
    "Keep every reply short enough to be spoken aloud, one or two sentences. "
    "If the user wants to order, tell them to say 'order pizza'."
)
DEFAULT_FALLBACK_REPLY = "Sorry, I had trouble coming up with an answer. Could you say that again?"


def _split(value: str) -> tuple[str, ...]:
    """Split a comma-separated setting into lowercase, non-empty items."""
    return tuple(item.strip().lower() for item in value.split(",") if item.strip())


def _bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AssistantConfig:
    """Settings for the voice assistant process."""

    anthropic_api_key: str | None = None
    llm_model: str = "claude-3-5-sonnet-20241022"
    llm_max_tokens: int = 300
    llm_timeout: float = 30.0
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    fallback_reply: str = DEFAULT_FALLBACK_REPLY
    history_messages: int = 10

    ordering_service_url: str = "http://localhost:8000"
    http_timeout: float = 10.0

    quit_keywords: tuple[str, ...] = ("quit",)
    order_phrases: tuple[str, ...] = ("order pizza", "order a pizza")
    cancel_keyword: str = "cancel"
    slot_retries: int = 1
    greeting: str | None = "Hi! I can chat, or say 'order pizza' to place an order. Say 'quit' to stop."

    listen_timeout: float = 5.0
    phrase_time_limit: float = 10.0
    recognition_language: str = "en-US"

    tts_language: str = "en"
    audio_path: Path = DEFAULT_AUDIO_PATH
    audio_playback: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "AssistantConfig":
        """Build config from environment variables, falling back to defaults."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            anthropic_api_key=env.get("ANTHROPIC_API_KEY") or None,
            llm_model=env.get("LLM_MODEL", defaults.llm_model),
            llm_max_tokens=int(env.get("LLM_MAX_TOKENS", defaults.llm_max_tokens)),
            llm_timeout=float(env.get("LLM_TIMEOUT", defaults.llm_timeout)),
            system_prompt=env.get("SYSTEM_PROMPT", defaults.system_prompt),
            history_messages=int(env.get("HISTORY_MESSAGES", defaults.history_messages)),
            ordering_service_url=env.get("ORDERING_SERVICE_URL", defaults.ordering_service_url),
            http_timeout=float(env.get("HTTP_TIMEOUT", defaults.http_timeout)),
            quit_keywords=_split(env["QUIT_KEYWORDS"]) if "QUIT_KEYWORDS" in env else defaults.quit_keywords,
            order_phrases=_split(env["ORDER_PHRASES"]) if "ORDER_PHRASES" in env else defaults.order_phrases,
            cancel_keyword=env.get("CANCEL_KEYWORD", defaults.cancel_keyword).strip().lower(),
            slot_retries=int(env.get("SLOT_RETRIES", defaults.slot_retries)),
            listen_timeout=float(env.get("LISTEN_TIMEOUT", defaults.listen_timeout)),
            phrase_time_limit=float(env.get("PHRASE_TIME_LIMIT", defaults.phrase_time_limit)),
            recognition_language=env.get("RECOGNITION_LANGUAGE", defaults.recognition_language),
            tts_language=env.get("TTS_LANGUAGE", defaults.tts_language),
            audio_path=Path(env["AUDIO_PATH"]) if env.get("AUDIO_PATH") else defaults.audio_path,
            audio_playback=_bool(env["AUDIO_PLAYBACK"]) if "AUDIO_PLAYBACK" in env else defaults.audio_playback,
        )


@dataclass(frozen=True)
class ServiceConfig:
    """Settings for the ordering microservice."""

    host: str = "localhost"
    port: int = 8000
    vendor_api_url: str | None = None
    vendor_api_key: str | None = None
    vendor_timeout: float = 15.0

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ServiceConfig":
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            host=env.get("API_HOST", defaults.host),
            port=int(env.get("API_PORT", defaults.port)),
            vendor_api_url=env.get("VENDOR_API_URL") or None,
            vendor_api_key=env.get("VENDOR_API_KEY") or None,
            vendor_timeout=float(env.get("VENDOR_TIMEOUT", defaults.vendor_timeout)),
        )
