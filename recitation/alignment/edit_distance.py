"""Character edit distance and length-adaptive similarity thresholds."""
from __future__ import annotations

from typing import List

from ..rules import DEFAULT_SIMILARITY_THRESHOLD, SIMILARITY_THRESHOLDS


def edit_distance(a: str, b: str) -> int:
    """Classic Levenshtein distance (single-character insert/delete/substitute).

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of edits turning a into b
    """
    n, m = len(a), len(b)
    dp: List[List[int]] = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        dp[i][0] = i
    for j in range(1, m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost_sub = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(
                dp[i - 1][j] + 1,  # del
                dp[i][j - 1] + 1,  # ins
                dp[i - 1][j - 1] + cost_sub,  # match / sub
            )

    return dp[n][m]


def similarity(a: str, b: str) -> float:
    """Edit distance normalized by the longer string, as a 0.0-1.0 score.

    Two empty strings are identical (1.0); an empty and a non-empty string
    share nothing (0.0).
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - edit_distance(a, b) / max(len(a), len(b))


def acceptance_threshold(length: int) -> float:
    """Minimum similarity for a fuzzy match against an expected word.

    Args:
        length: Normalized length of the expected word

    Returns:
        Threshold in 0.0-1.0, stricter for shorter words
    """
    for max_length, threshold in SIMILARITY_THRESHOLDS:
        if length <= max_length:
            return threshold
    return DEFAULT_SIMILARITY_THRESHOLD
