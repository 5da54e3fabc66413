"""Word-level verdicts and scoring for recitation attempts."""
from .verdict_builder import verify

__all__ = ["verify"]
