"""Speech output backed by Google Text-to-Speech."""

import asyncio
from pathlib import Path
from typing import Callable, Protocol

from gtts import gTTS

from ..config import AssistantConfig
from ..logging_config import get_logger

logger = get_logger(__name__)


class ISpeechOutput(Protocol):
    """Sink for assistant replies."""

    async def speak(self, text: str) -> None:
        """Render text to the user. Never raises."""
        ...


def play_audio_file(path: Path) -> None:
    """Play an audio file and block until playback finishes."""
    # pygame ships in the optional "audio" extra
    import pygame

    if not pygame.mixer.get_init():
        pygame.mixer.init()
    pygame.mixer.music.load(str(path))
    pygame.mixer.music.play()
    clock = pygame.time.Clock()
    while pygame.mixer.music.get_busy():
        clock.tick(10)
    pygame.mixer.music.unload()


class GTTSSpeechOutput:
    """Synthesizes replies to an mp3 file and optionally plays it.

    With playback enabled the file is removed once played; otherwise the last
    reply stays at the configured audio path.
    """

    def __init__(
        self,
        config: AssistantConfig,
        player: Callable[[Path], None] = play_audio_file,
    ):
        self._language = config.tts_language
        self._audio_path = Path(config.audio_path)
        self._playback = config.audio_playback
        self._player = player

    async def speak(self, text: str) -> None:
        if not text.strip():
            return

        logger.info("Speaking: %s", text[:100])
        try:
            await asyncio.to_thread(self._speak_blocking, text)
        except Exception as e:
            logger.error("Speech synthesis failed: %s", e, exc_info=True)

    def _speak_blocking(self, text: str) -> None:
        self._audio_path.parent.mkdir(parents=True, exist_ok=True)
        gTTS(text=text, lang=self._language).save(str(self._audio_path))

        if not self._playback:
            return

        try:
            self._player(self._audio_path)
        finally:
            self._audio_path.unlink(missing_ok=True)
