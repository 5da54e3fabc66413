"""Prefix variants of a normalized Arabic word.

Recognizers attach or drop the definite article and the one-letter
conjunctions/prepositions inconsistently, so a word is compared through all
of its plausible segmentations instead of one spelling.
"""
from __future__ import annotations

from typing import FrozenSet, Set

from ..rules import ATTACHABLE_PREFIXES, DEFINITE_ARTICLE


def _strip_article(word: str) -> str:
    """Return the word without a leading definite article, or "" if none."""
    if word.startswith(DEFINITE_ARTICLE):
        return word[len(DEFINITE_ARTICLE):]
    return ""


def generate_variants(word: str) -> FrozenSet[str]:
    """Expand a normalized word into its prefix variants.

    Example: "والرحمن" -> {"والرحمن", "الرحمن", "رحمن"}

    Args:
        word: A single normalized word

    Returns:
        Immutable set containing the word itself and every form obtained by
        removing the article and/or one attachable prefix letter
    """
    if not word:
        return frozenset()

    variants: Set[str] = {word}

    bare = _strip_article(word)
    if bare:
        variants.add(bare)

    for prefix in ATTACHABLE_PREFIXES:
        if len(word) > 1 and word.startswith(prefix):
            rest = word[len(prefix):]
            variants.add(rest)
            # prefix + article, e.g. "wa" + "al"
            bare_rest = _strip_article(rest)
            if bare_rest:
                variants.add(bare_rest)

    return frozenset(variants)
