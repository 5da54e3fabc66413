"""Data models shared by the alignment, scoring and session layers."""
from .alignment import Alignment
from .verdict import ExpectedWord, Score, TraceEntry, Verdict, VerificationResult, WordStatus

__all__ = [
    "Alignment",
    "ExpectedWord",
    "Score",
    "TraceEntry",
    "Verdict",
    "VerificationResult",
    "WordStatus",
]
