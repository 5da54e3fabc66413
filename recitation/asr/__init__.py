"""ASR (Automatic Speech Recognition) integration."""
from .recognizer import transcribe

__all__ = ["transcribe"]
