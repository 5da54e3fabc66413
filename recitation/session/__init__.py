"""Practice session orchestration around the verification engine."""
from .practice_session import PracticeSession, SessionState

__all__ = ["PracticeSession", "SessionState"]
