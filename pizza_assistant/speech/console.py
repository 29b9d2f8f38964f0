"""Text-mode stand-ins for the microphone and speaker."""

import asyncio
import sys
from typing import TextIO


class ConsoleSpeechInput:
    """Reads utterances from stdin. EOF is reported as the quit phrase."""

    def __init__(self, eof_text: str = "quit", prompt: str = "you> "):
        self._eof_text = eof_text
        self._prompt = prompt

    async def listen(self) -> str:
        try:
            line = await asyncio.to_thread(input, self._prompt)
        except EOFError:
            return self._eof_text
        return line.strip()


class ConsoleSpeechOutput:
    """Prints replies instead of speaking them."""

    def __init__(self, stream: TextIO | None = None, prefix: str = "assistant> "):
        self._stream = stream
        self._prefix = prefix

    async def speak(self, text: str) -> None:
        print(f"{self._prefix}{text}", file=self._stream or sys.stdout, flush=True)
