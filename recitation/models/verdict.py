"""Data models for per-word verdicts and session scores."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class WordStatus(str, Enum):
    PENDING = "pending"
    CURRENT = "current"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class ExpectedWord:
    """A word of the passage being practised.

    Attributes:
        text: The word as typed/loaded (raw, may carry diacritics)
        status: Practice state of the word
        spoken_text: Transcript token attributed to the word ("" if none)
    """
    text: str
    status: WordStatus = WordStatus.PENDING
    spoken_text: str = ""


@dataclass(frozen=True)
class Verdict:
    """Final judgement for one expected word.

    Attributes:
        word: The expected word (raw)
        status: CORRECT or INCORRECT
        spoken_text: Literal spoken token behind the verdict ("" if none was available)
    """
    word: str
    status: WordStatus
    spoken_text: str = ""

    @property
    def is_correct(self) -> bool:
        return self.status is WordStatus.CORRECT


@dataclass(frozen=True)
class Score:
    correct: int = 0
    total: int = 0

    @property
    def percentage(self) -> int:
        """Share of correct words, 0-100, rounded half up."""
        if self.total == 0:
            return 0
        return int(self.correct * 100 / self.total + 0.5)


@dataclass(frozen=True)
class TraceEntry:
    """One scored candidate considered for an expected word (diagnostics only)."""
    expected_index: int
    candidate: str
    score: float


@dataclass(frozen=True)
class VerificationResult:
    words: List[Verdict]
    score: Score
    trace: List[TraceEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready view: {"words": [...], "score": {...}, "trace": [...]}."""
        return {
            "words": [
                {"word": v.word, "status": v.status.value, "spoken_text": v.spoken_text}
                for v in self.words
            ],
            "score": {"correct": self.score.correct, "total": self.score.total},
            "trace": [
                {"expected_index": t.expected_index, "candidate": t.candidate, "score": t.score}
                for t in self.trace
            ],
        }
