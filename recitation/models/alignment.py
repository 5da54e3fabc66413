"""Data model for the expected-to-spoken word alignment."""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class Alignment:
    """Longest-common-subsequence alignment of expected words to spoken tokens.

    Attributes:
        expected_to_spoken: For each expected word, the index of its spoken
            token or None if unmatched. Non-None entries strictly increase.
        length: Number of matched pairs (the final LCS table value)
    """
    expected_to_spoken: Tuple[Optional[int], ...]
    length: int = 0

    @property
    def matched_spoken(self) -> FrozenSet[int]:
        return frozenset(j for j in self.expected_to_spoken if j is not None)
