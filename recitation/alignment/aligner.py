"""Alignment of expected words to spoken tokens."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from recitation.models.alignment import Alignment
from .matcher import matches


def build_lcs_table(
    expected: Sequence[str], spoken: Sequence[str]
) -> Tuple[List[List[int]], List[List[bool]]]:
    """Fill the longest-common-subsequence table using the fuzzy word match.

    Returns:
        - dp: (n+1) x (m+1) table, dp[i][j] = best alignment length of
          expected[:i] against spoken[:j]
        - hit: n x m table, hit[i][j] = matches(spoken[j], expected[i])
    """
    n, m = len(expected), len(spoken)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    hit = [[False] * m for _ in range(n)]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if matches(spoken[j - 1], expected[i - 1]):
                hit[i - 1][j - 1] = True
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    return dp, hit


def align_words(expected: Sequence[str], spoken: Sequence[str]) -> Alignment:
    """Align expected words to spoken tokens.

    Backtracks from the bottom-right cell: a matching pair is taken
    diagonally; otherwise the walk moves to the larger neighbour and, on
    equal values, drops the expected word (i - 1) rather than the spoken token.

    Args:
        expected: Expected words (raw or normalized)
        spoken: Spoken tokens in transcript order

    Returns:
        Alignment mapping each expected index to a spoken index or None
    """
    dp, hit = build_lcs_table(expected, spoken)

    expected_to_spoken: List[Optional[int]] = [None] * len(expected)
    i, j = len(expected), len(spoken)
    while i > 0 and j > 0:
        if hit[i - 1][j - 1]:
            expected_to_spoken[i - 1] = j - 1
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    return Alignment(expected_to_spoken=tuple(expected_to_spoken), length=dp[-1][-1])
