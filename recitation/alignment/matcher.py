"""Variant-or-fuzzy equality between a spoken token and an expected word."""
from __future__ import annotations

from typing import Set

from .edit_distance import acceptance_threshold, similarity
from .normalizer import normalize_arabic
from .tokenizer import tokenize_normalized
from .variants import generate_variants


def matches(spoken_token: str, expected_word: str) -> bool:
    """Decide whether a spoken token counts as a reading of the expected word.

    Both sides are normalized. The expected word's prefix variants are compared
    against a pool made of the whole spoken string plus the variants of each of
    its tokens. Equality or substring containment in either direction is a
    match (recognizers merge and split words). Failing that, the best
    similarity over all pairs must reach the threshold for the expected
    word's length.

    Args:
        spoken_token: Token (or short phrase) from the transcript
        expected_word: Word from the expected text

    Returns:
        True if the token is accepted for the word
    """
    spoken = normalize_arabic(spoken_token)
    expected = normalize_arabic(expected_word)
    if not spoken or not expected:
        return False

    expected_variants = generate_variants(expected)

    pool: Set[str] = {spoken}
    for token in tokenize_normalized(spoken):
        pool.update(generate_variants(token))

    for variant in expected_variants:
        for candidate in pool:
            if variant == candidate or variant in candidate or candidate in variant:
                return True

    best = max(
        similarity(variant, candidate)
        for variant in expected_variants
        for candidate in pool
    )
    return best >= acceptance_threshold(len(expected))
