"""Recitation practice session.

Drives one practice attempt over a passage:
- User enters (or picks the sample) passage
- Recognizer produces a transcript of the recitation
- A transcript with no Arabic words is retried once, then verified as-is
- Verdicts are written back onto the passage words for display

The verification itself is stateless; this controller only owns the word
list, the retry budget and the score of the current attempt.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from ..alignment.tokenizer import split_expected, tokenize_transcript
from ..models.verdict import ExpectedWord, Score, VerificationResult, WordStatus
from ..rules import MAX_EMPTY_TRANSCRIPT_RETRIES
from ..scorer.verdict_builder import verify


class SessionState(str, Enum):
    IDLE = "idle"
    LISTENING = "listening"
    COMPLETE = "complete"


class PracticeSession:
    """Finite-state controller for a single recitation attempt."""

    def __init__(self, max_empty_retries: int = MAX_EMPTY_TRANSCRIPT_RETRIES) -> None:
        self.max_empty_retries = max_empty_retries
        self.state = SessionState.IDLE
        self.words: List[ExpectedWord] = []
        self.score = Score()
        self.result: Optional[VerificationResult] = None
        self.empty_retries = 0

    def start(self, text: str) -> List[ExpectedWord]:
        """Begin a session over the given passage.

        Raises:
            ValueError: if the passage has no words
        """
        raw_words = split_expected(text or "")
        if not raw_words:
            raise ValueError("Enter the text to recite first")

        self.words = [
            ExpectedWord(text=w, status=WordStatus.CURRENT if idx == 0 else WordStatus.PENDING)
            for idx, w in enumerate(raw_words)
        ]
        self.score = Score(correct=0, total=len(self.words))
        self.result = None
        self.empty_retries = 0
        self.state = SessionState.LISTENING
        return self.words

    def submit(self, transcript: str) -> Optional[VerificationResult]:
        """Hand a finalized transcript to the session.

        Returns:
            The verification result, or None when a transcript with no
            Arabic words was absorbed by the retry budget and another
            attempt is expected.

        Raises:
            ValueError: if the session is not listening
        """
        if self.state is not SessionState.LISTENING:
            raise ValueError(f"Cannot submit a transcript while {self.state.value}")

        spoken_tokens, _ = tokenize_transcript(transcript or "")
        if not spoken_tokens and self.empty_retries < self.max_empty_retries:
            self.empty_retries += 1
            return None

        return self._complete(transcript or "")

    def expire(self) -> VerificationResult:
        """Close a listening session whose recognition timed out."""
        if self.state is not SessionState.LISTENING:
            raise ValueError(f"Cannot expire a session while {self.state.value}")
        return self._complete("")

    def run(self, attempt: Callable[[], str]) -> VerificationResult:
        """Call a transcript source until the session completes.

        Args:
            attempt: Zero-argument callable returning one transcript per call
                (e.g. record + transcribe)
        """
        while True:
            result = self.submit(attempt())
            if result is not None:
                return result

    def stop(self) -> None:
        """Stop listening, keeping words and score on screen."""
        self.state = SessionState.IDLE

    def reset(self) -> None:
        self.state = SessionState.IDLE
        self.words = []
        self.score = Score()
        self.result = None
        self.empty_retries = 0

    @property
    def current_index(self) -> int:
        """Index of the first word not yet judged (len(words) when all are)."""
        for idx, word in enumerate(self.words):
            if word.status in (WordStatus.PENDING, WordStatus.CURRENT):
                return idx
        return len(self.words)

    @property
    def progress(self) -> int:
        if not self.words:
            return 0
        return int(self.current_index * 100 / len(self.words) + 0.5)

    @property
    def score_percentage(self) -> int:
        return self.score.percentage

    def _complete(self, transcript: str) -> VerificationResult:
        result = verify([w.text for w in self.words], transcript)
        for word, verdict in zip(self.words, result.words):
            word.status = verdict.status
            word.spoken_text = verdict.spoken_text

        self.result = result
        self.score = result.score
        self.state = SessionState.COMPLETE
        return result
