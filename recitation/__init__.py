"""Recitation verification: per-word feedback for Quranic Arabic read aloud."""
from .alignment import generate_variants, matches, normalize_arabic, similarity
from .models import ExpectedWord, Score, Verdict, VerificationResult, WordStatus
from .scorer import verify
from .session import PracticeSession, SessionState

__all__ = [
    "generate_variants",
    "matches",
    "normalize_arabic",
    "similarity",
    "ExpectedWord",
    "Score",
    "Verdict",
    "VerificationResult",
    "WordStatus",
    "verify",
    "PracticeSession",
    "SessionState",
]
