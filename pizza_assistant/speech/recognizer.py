"""Speech input backed by the speech_recognition library."""

import asyncio
from typing import Protocol

import speech_recognition as sr

from ..config import AssistantConfig
from ..logging_config import get_logger

logger = get_logger(__name__)


class ISpeechInput(Protocol):
    """Source of user utterances."""

    async def listen(self) -> str:
        """Capture one utterance. Returns "" when nothing usable was heard."""
        ...


class MicrophoneSpeechInput:
    """Captures microphone audio and transcribes it with Google's recognizer.

    The microphone is opened once at construction so a missing PyAudio install
    fails at startup rather than on every turn.
    """

    def __init__(
        self,
        config: AssistantConfig,
        recognizer: sr.Recognizer | None = None,
        microphone: sr.Microphone | None = None,
    ):
        self._recognizer = recognizer or sr.Recognizer()
        self._microphone = microphone or sr.Microphone()
        self._listen_timeout = config.listen_timeout
        self._phrase_time_limit = config.phrase_time_limit
        self._language = config.recognition_language
        self._calibrated = False

    async def listen(self) -> str:
        """Capture one utterance; blocking audio I/O runs in a worker thread."""
        return await asyncio.to_thread(self._listen_blocking)

    def _listen_blocking(self) -> str:
        try:
            with self._microphone as source:
                if not self._calibrated:
                    self._recognizer.adjust_for_ambient_noise(source, duration=0.5)
                    self._calibrated = True
                logger.debug("Listening...")
                audio = self._recognizer.listen(
                    source,
                    timeout=self._listen_timeout,
                    phrase_time_limit=self._phrase_time_limit,
                )
            text = self._recognizer.recognize_google(audio, language=self._language)
        except sr.WaitTimeoutError:
            logger.debug("No speech detected within %ss", self._listen_timeout)
            return ""
        except sr.UnknownValueError:
            logger.info("Speech was not understood")
            return ""
        except sr.RequestError as e:
            logger.error("Speech recognition service error: %s", e)
            return ""
        except OSError as e:
            logger.error("Microphone error: %s", e)
            return ""

        text = text.strip()
        logger.info("Heard: %s", text)
        return text
