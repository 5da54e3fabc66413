"""Normalization, tokenization and alignment of expected text to ASR output."""
from .aligner import align_words, build_lcs_table
from .edit_distance import acceptance_threshold, edit_distance, similarity
from .matcher import matches
from .normalizer import normalize_arabic
from .tokenizer import split_expected, tokenize_normalized, tokenize_transcript
from .variants import generate_variants

__all__ = [
    "align_words",
    "build_lcs_table",
    "acceptance_threshold",
    "edit_distance",
    "similarity",
    "matches",
    "normalize_arabic",
    "split_expected",
    "tokenize_normalized",
    "tokenize_transcript",
    "generate_variants",
]
