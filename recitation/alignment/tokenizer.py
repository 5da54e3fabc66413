"""Tokenization of expected text and ASR transcripts for alignment."""
from __future__ import annotations

import re
from typing import List, Tuple

from .normalizer import normalize_arabic


def tokenize_normalized(text: str) -> List[str]:
    """Split an already normalized string into word tokens.

    Example: "بسم الله" -> ["بسم", "الله"]
    """
    return [token for token in re.split(r"\s+", text) if token]


def split_expected(text: str) -> List[str]:
    """Split a raw user sentence into expected words, keeping each word as typed.

    Args:
        text: The sentence to recite (with or without diacritics)

    Returns:
        List of raw words in reading order
    """
    return [word for word in re.split(r"\s+", text.strip()) if word]


def tokenize_transcript(transcript: str) -> Tuple[List[str], List[str]]:
    """Tokenize a spoken transcript.

    Tokens that normalize to nothing (Latin text, punctuation, stray marks)
    are dropped.

    Returns:
        - spoken_tokens: normalized tokens
        - raw_tokens: the corresponding tokens exactly as the recognizer wrote them
    """
    spoken_tokens: List[str] = []
    raw_tokens: List[str] = []

    for raw in split_expected(transcript or ""):
        normalized = normalize_arabic(raw)
        if normalized:
            spoken_tokens.append(normalized)
            raw_tokens.append(raw)

    return spoken_tokens, raw_tokens
