"""Speech input/output adapters."""

from .console import ConsoleSpeechInput, ConsoleSpeechOutput
from .recognizer import ISpeechInput, MicrophoneSpeechInput
from .synthesizer import GTTSSpeechOutput, ISpeechOutput

__all__ = [
    "ISpeechInput",
    "ISpeechOutput",
    "MicrophoneSpeechInput",
    "GTTSSpeechOutput",
    "ConsoleSpeechInput",
    "ConsoleSpeechOutput",
]
