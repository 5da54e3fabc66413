"""Fixed matching heuristics for recitation verification."""
from __future__ import annotations

# Two-letter definite article ("al-")
DEFINITE_ARTICLE = "ال"

# Single-letter conjunctions/prepositions that recognizers attach or drop:
# wa, fa, bi, li, ka, sa
ATTACHABLE_PREFIXES = ("و", "ف", "ب", "ل", "ك", "س")

# Similarity needed to accept a fuzzy match, keyed by the maximum normalized
# length of the expected word. Short words are stricter.
SIMILARITY_THRESHOLDS = (
    (2, 0.85),
    (4, 0.75),
    (6, 0.70),
)

# Threshold for anything longer than the last step above
DEFAULT_SIMILARITY_THRESHOLD = 0.65

# An empty transcript is retried at most this many times before it is
# verified as-is (every word incorrect)
MAX_EMPTY_TRANSCRIPT_RETRIES = 1

# Sample passage offered to the user (Bismillah)
SAMPLE_TEXT = "بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ"
